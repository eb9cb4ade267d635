"""Generate a static Python module of job options from the jobs table.

Usage:
    uv run python -m scripts.generate_constants [output_path]
Default output is app/domain/generated_job_options.py. Requires DATABASE_URL.
Run during build; the generated module is not edited by hand.
"""

import asyncio
import sys
from pathlib import Path

import app.infrastructure.persistence.database as database
from app.application.interfaces import IDistinctValueSource
from app.application.services.option_formatter import format_snake_case_label, unique_values
from app.core.config import get_settings
from app.domain.enums import ConstantCategory
from app.infrastructure.persistence.repositories import JobConstantsRepository
from app.shared.utils.datetime import utc_now_iso

DEFAULT_OUTPUT_PATH = Path("app/domain/generated_job_options.py")

# Module-level name for each category in the generated file.
_CONSTANT_NAMES: dict[ConstantCategory, str] = {
    ConstantCategory.JOB_ROLES: "JOB_ROLES",
    ConstantCategory.PRIMARY_PRODUCTS: "PRIMARY_PRODUCTS",
    ConstantCategory.JOB_TYPES: "JOB_TYPES",
    ConstantCategory.COUNTRIES: "COUNTRIES",
}


def generated_label(category: ConstantCategory, value: str) -> str:
    """Countries are emitted verbatim; every other category uses snake_case labels."""
    if category == ConstantCategory.COUNTRIES:
        return value
    return format_snake_case_label(value)


async def collect_values(source: IDistinctValueSource) -> dict[ConstantCategory, list[str]]:
    """Read every category column concurrently and deduplicate the values."""
    categories = list(ConstantCategory)
    rows = await asyncio.gather(
        *(source.distinct_values(category.column) for category in categories)
    )
    return {category: unique_values(raw) for category, raw in zip(categories, rows)}


def render_module(values: dict[ConstantCategory, list[str]], generated_at: str) -> str:
    """Return the source text of the generated options module."""
    lines = [
        '"""Job options generated from the jobs table.',
        "",
        f"Generated at: {generated_at}",
        "Do not edit manually; run 'python -m scripts.generate_constants' to update.",
        '"""',
        "",
    ]
    for category, name in _CONSTANT_NAMES.items():
        lines.append("")
        lines.append(f"{name} = (")
        for value in values.get(category, []):
            label = generated_label(category, value)
            lines.append(f'    {{"value": {value!r}, "label": {label!r}}},')
        lines.append(")")
    return "\n".join(lines) + "\n"


async def main() -> None:
    """Query the jobs table and write the generated module."""
    settings = get_settings()
    output_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT_PATH
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    print("Generating constants from database...")
    repo = JobConstantsRepository(database.AsyncSessionLocal, table_name=settings.jobs_table)
    try:
        values = await collect_values(repo)
    except Exception as e:
        print(f"Failed to generate constants: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        await database.dispose_engine()

    output_path.write_text(render_module(values, utc_now_iso()), encoding="utf-8")
    print(f"Written to: {output_path}")
    print(
        "Generated: "
        f"{len(values[ConstantCategory.JOB_ROLES])} roles, "
        f"{len(values[ConstantCategory.PRIMARY_PRODUCTS])} products, "
        f"{len(values[ConstantCategory.JOB_TYPES])} types, "
        f"{len(values[ConstantCategory.COUNTRIES])} countries"
    )


if __name__ == "__main__":
    asyncio.run(main())
