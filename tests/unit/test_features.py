import json

import pytest

from app.core.context import ContextError
from app.modules.concept_map import (
    ConceptMapData,
    dangling_links,
    generate_concept_map,
    generate_concept_map_for_topic,
)
from app.modules.flashcards import Flashcard, generate_flashcards
from app.modules.generation import BackendError, ChatRole, MalformedResponseError
from app.modules.ingest import extract_text_from_file, fetch_topic_info, transcribe_audio
from app.modules.planning import generate_lesson_plan, generate_study_plan
from app.modules.quiz.generator import generate_mcqs, generate_study_guide
from app.modules.quiz.models import MCQ, Difficulty
from app.modules.search import generate_answer, semantic_search
from app.modules.summary import generate_summary
from app.modules.tutor import Conversation
from app.modules.writing import generate_essay_arguments, generate_essay_outline


async def test_photosynthesis_flashcard_scenario(backend, ctx):
    backend.script(
        '[{"question":"What does photosynthesis convert?",'
        '"answer":"Light into chemical energy."}]'
    )
    cards = await generate_flashcards(backend.client(), ctx, count=1)
    assert cards == [
        Flashcard(
            question="What does photosynthesis convert?",
            answer="Light into chemical energy.",
        )
    ]
    assert "generate a list of 1 question" in backend.last_prompt
    assert "Photosynthesis converts light into chemical energy." in backend.last_prompt


async def test_flashcards_drop_blank_cards(backend, ctx):
    backend.script(json.dumps({"flashcards": [
        {"question": " Q ", "answer": " A "},
        {"question": "", "answer": "orphan"},
    ]}))
    cards = await generate_flashcards(backend.client(), ctx)
    assert cards == [Flashcard(question="Q", answer="A")]


async def test_features_need_ingested_text(backend, empty_ctx):
    client = backend.client()
    for call in (
        generate_flashcards(client, empty_ctx),
        generate_summary(client, empty_ctx),
        generate_study_plan(client, empty_ctx, 3),
    ):
        with pytest.raises(ContextError, match="ingest"):
            await call
    assert backend.calls == []


async def test_summary_uses_language(backend, ctx):
    backend.script("Resumen.")
    out = await generate_summary(backend.client(), ctx.model_copy(update={"language": "Spanish"}))
    assert out == "Resumen."
    assert "in Spanish" in backend.last_prompt


async def test_mcqs_keep_only_well_formed_questions(backend, ctx):
    good = {
        "question": "What is produced?",
        "options": ["Glucose", "Salt", "Iron", "Sand"],
        "correctAnswer": "Glucose",
        "explanation": "Photosynthesis makes sugar.",
    }
    three_options = dict(good, options=["Glucose", "Salt", "Iron"])
    answer_not_listed = dict(good, correctAnswer="Oxygen")
    repeated_option = dict(good, options=["Glucose", "Glucose", "Iron", "Sand"])
    backend.script(json.dumps({"mcqs": [good, three_options, answer_not_listed, repeated_option]}))

    mcqs = await generate_mcqs(backend.client(), ctx, difficulty=Difficulty.HARD, count=4)
    assert len(mcqs) == 1
    assert mcqs[0].correct_answer == "Glucose"
    assert "of Hard difficulty" in backend.last_prompt


async def test_study_guide_lists_missed_questions(backend, ctx):
    backend.script("Focus on the light reactions.")
    missed = MCQ(
        question="Where does it happen?",
        options=["Chloroplast", "Nucleus", "Ribosome", "Vacuole"],
        correct_answer="Chloroplast",
        explanation="",
    )
    out = await generate_study_guide(backend.client(), ctx, [missed])
    assert out == "Focus on the light reactions."
    assert '- Question: "Where does it happen?" (Correct Answer: "Chloroplast")' in backend.last_prompt


async def test_semantic_search_limits_to_top_k(backend, ctx):
    backend.script('{"snippets": ["a", "b", "c", "d"]}')
    out = await semantic_search(backend.client(), ctx, "light", top_k=2)
    assert out == ["a", "b"]


async def test_semantic_search_nothing_found(backend, ctx):
    backend.script("{}")
    assert await semantic_search(backend.client(), ctx, "light") == []


async def test_semantic_search_requires_query(backend, ctx):
    with pytest.raises(ContextError, match="search query"):
        await semantic_search(backend.client(), ctx, "  ")


async def test_answer_is_grounded_in_context(backend, ctx):
    backend.script("Light into chemical energy.")
    out = await generate_answer(backend.client(), ctx, "What is converted?")
    assert out == "Light into chemical energy."
    assert "Using ONLY the provided context" in backend.last_prompt


async def test_concept_map_from_text(backend, ctx):
    backend.script(json.dumps({
        "nodes": [{"id": "Photosynthesis", "group": 1}, {"id": "Light", "group": 2}],
        "links": [{"source": "Photosynthesis", "target": "Light", "value": 8}],
    }))
    data = await generate_concept_map(backend.client(), ctx)
    assert [n.id for n in data.nodes] == ["Photosynthesis", "Light"]
    assert dangling_links(data) == []


async def test_concept_map_null_is_empty(backend, ctx):
    backend.script("null")
    data = await generate_concept_map_for_topic(backend.client(), ctx, "Cells")
    assert data == ConceptMapData()


def test_dangling_links_are_reported():
    data = ConceptMapData.model_validate({
        "nodes": [{"id": "A", "group": 1}],
        "links": [{"source": "A", "target": "B", "value": 3}],
    })
    assert [link.target for link in dangling_links(data)] == ["B"]


async def test_essay_outline(backend, ctx):
    backend.script(json.dumps({
        "title": "Energy from Light",
        "introduction": "Plants capture light.",
        "body": [{"heading": "Light reactions", "points": ["ATP", "NADPH"]}],
        "conclusion": "Life runs on sunlight.",
    }))
    outline = await generate_essay_outline(backend.client(), ctx, "Why light matters")
    assert outline.body[0].points == ["ATP", "NADPH"]


async def test_essay_outline_missing_field_is_malformed(backend, ctx):
    backend.script('{"title": "Only a title"}')
    with pytest.raises(MalformedResponseError):
        await generate_essay_outline(backend.client(), ctx, "Why light matters")


async def test_essay_arguments(backend, ctx):
    backend.script("- Counterpoint")
    assert await generate_essay_arguments(backend.client(), ctx, "Thesis") == "- Counterpoint"


async def test_lesson_plan(backend, ctx):
    backend.script(json.dumps({
        "title": "Photosynthesis 101",
        "objective": "Explain energy conversion",
        "duration": "50 minutes",
        "materials": ["Leaves"],
        "activities": [{"name": "Warm-up", "duration": "5 minutes", "description": "Quiz"}],
        "assessment": "Exit ticket",
    }))
    plan = await generate_lesson_plan(backend.client(), ctx, "Photosynthesis")
    assert plan.activities[0].name == "Warm-up"
    assert "50-minute lesson plan" in backend.last_prompt


async def test_study_plan_uses_camel_case_wire_names(backend, ctx):
    backend.script(json.dumps({
        "title": "Exam prep",
        "durationDays": 2,
        "schedule": [
            {"day": 1, "topic": "Light reactions", "tasks": ["Read"]},
            {"day": 2, "topic": "Calvin cycle", "tasks": ["Review"]},
        ],
    }))
    plan = await generate_study_plan(backend.client(), ctx, 45)
    assert plan.duration_days == 2
    assert plan.model_dump(by_alias=True)["durationDays"] == 2
    assert "within 30 days" in backend.last_prompt


async def test_tutor_conversation_grows_only_on_success(backend, ctx):
    backend.script("What do leaves absorb?", RuntimeError("offline"))
    conversation = Conversation()
    reply = await conversation.ask(backend.client(), ctx, "How do plants eat?")
    assert reply == "What do leaves absorb?"
    assert [m.role for m in conversation.messages] == [ChatRole.USER, ChatRole.MODEL]
    assert "Socratic" in backend.last_instructions
    assert "Photosynthesis converts light" in backend.last_instructions

    with pytest.raises(BackendError):
        await conversation.ask(backend.client(), ctx, "Light?")
    assert len(conversation.messages) == 2


async def test_ingest_sources(backend, ctx):
    backend.script("notes", "extracted", "spoken")
    client = backend.client()
    assert await fetch_topic_info(client, ctx, "Cells") == "notes"
    assert await extract_text_from_file(client, ctx, b"%PDF", "application/pdf") == "extracted"
    assert await transcribe_audio(client, ctx, b"RIFF", "audio/wav") == "spoken"
    assert backend.last_prompt[1].media_type == "audio/wav"


async def test_empty_upload_is_rejected(backend, ctx):
    with pytest.raises(ContextError):
        await extract_text_from_file(backend.client(), ctx, b"", "application/pdf")


async def test_mcq_with_repeated_options_is_dropped(backend, ctx):
    backend.script(json.dumps([{
        "question": "Capital of France?",
        "options": ["Paris", "Paris ", "Rome", "Oslo"],
        "correctAnswer": "Paris",
        "explanation": "",
    }]))
    assert await generate_mcqs(backend.client(), ctx) == []
