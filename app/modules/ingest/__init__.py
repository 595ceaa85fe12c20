from .sources import extract_text_from_file, fetch_topic_info, transcribe_audio

__all__ = ["extract_text_from_file", "fetch_topic_info", "transcribe_audio"]
