"""Build-time constants generator: value collection and module rendering."""

from app.domain.enums import ConstantCategory
from scripts.generate_constants import collect_values, generated_label, render_module
from tests.fakes import JOB_ROWS, FakeSource


async def test_collect_values_dedupes_every_category() -> None:
    values = await collect_values(FakeSource(rows=JOB_ROWS))
    assert values[ConstantCategory.JOB_ROLES] == ["solution_architect", "data_engineer"]
    assert values[ConstantCategory.COUNTRIES] == ["US", "DE"]


def test_generated_labels() -> None:
    assert generated_label(ConstantCategory.JOB_TYPES, "full-time") == "Full-time"
    assert generated_label(ConstantCategory.PRIMARY_PRODUCTS, "data_cloud") == "Data Cloud"
    assert generated_label(ConstantCategory.COUNTRIES, "US") == "US"


def test_render_module_is_valid_python() -> None:
    values = {
        ConstantCategory.JOB_ROLES: ["solution_architect"],
        ConstantCategory.PRIMARY_PRODUCTS: [],
        ConstantCategory.JOB_TYPES: ["contract"],
        ConstantCategory.COUNTRIES: ["US"],
    }
    source = render_module(values, "2025-01-31T09:15:02.123Z")
    assert "Generated at: 2025-01-31T09:15:02.123Z" in source
    namespace: dict = {}
    exec(compile(source, "generated_job_options.py", "exec"), namespace)
    assert namespace["JOB_ROLES"] == (
        {"value": "solution_architect", "label": "Solution Architect"},
    )
    assert namespace["PRIMARY_PRODUCTS"] == ()
    assert namespace["COUNTRIES"] == ({"value": "US", "label": "US"},)
