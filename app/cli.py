from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from app.core.config import settings
from app.core.context import ContextError, StudyContext
from app.core.logging import setup_logging
from app.modules.flashcards import generate_flashcards
from app.modules.generation import GenerationClient, GenerationError
from app.modules.planning import generate_study_plan
from app.modules.quiz.generator import generate_mcqs
from app.modules.quiz.models import Difficulty
from app.modules.search import semantic_search
from app.modules.summary import generate_summary


def _load_text(args: argparse.Namespace) -> str:
    if args.text and args.file:
        raise SystemExit("Provide either --text or --file, not both")
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text:
        return args.text
    raise SystemExit("--text or --file is required")


def _add_material_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--text", "-t", help="Study material (text)")
    p.add_argument("--file", "-f", help="Path to a UTF-8 text file with the material")


async def _run(args: argparse.Namespace, ctx: StudyContext) -> object:
    client = GenerationClient()
    if args.cmd == "summary":
        return await generate_summary(client, ctx)
    if args.cmd == "flashcards":
        cards = await generate_flashcards(client, ctx, count=args.count)
        return [c.model_dump() for c in cards]
    if args.cmd == "mcqs":
        mcqs = await generate_mcqs(
            client, ctx, difficulty=Difficulty(args.difficulty), count=args.count
        )
        return [q.model_dump(by_alias=True) for q in mcqs]
    if args.cmd == "search":
        return await semantic_search(client, ctx, args.query, top_k=args.top_k)
    if args.cmd == "study-plan":
        plan = await generate_study_plan(client, ctx, args.days)
        return plan.model_dump(by_alias=True)
    raise SystemExit(f"Unknown command: {args.cmd}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="study-assistant", description="Study assistant CLI"
    )
    parser.add_argument("--model", default=settings.generation.default_model)
    parser.add_argument("--language", default=settings.generation.default_language)
    sub = parser.add_subparsers(dest="cmd", required=True)

    _add_material_args(sub.add_parser("summary", help="Summarize the material"))

    fc = sub.add_parser("flashcards", help="Generate question/answer flashcards")
    _add_material_args(fc)
    fc.add_argument("--count", type=int, default=10)

    mq = sub.add_parser("mcqs", help="Generate multiple-choice questions")
    _add_material_args(mq)
    mq.add_argument("--count", type=int, default=5)
    mq.add_argument(
        "--difficulty", choices=[d.value for d in Difficulty], default="Medium"
    )

    se = sub.add_parser("search", help="Find the snippets most relevant to a query")
    _add_material_args(se)
    se.add_argument("--query", "-q", required=True)
    se.add_argument("--top-k", type=int, default=4)

    sp = sub.add_parser("study-plan", help="Build a day-by-day study plan")
    _add_material_args(sp)
    sp.add_argument("--days", type=int, default=7)

    args = parser.parse_args(argv)
    setup_logging()
    ctx = StudyContext(
        ingested_text=_load_text(args), model_id=args.model, language=args.language
    )
    try:
        result = asyncio.run(_run(args, ctx))
    except (ContextError, GenerationError) as e:
        print(str(e))
        return 1
    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
