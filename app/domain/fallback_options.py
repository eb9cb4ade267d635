"""Curated fallback options for every constant category.

Used when the jobs table cannot be read or yields no usable values. Both
the server cache and the client SDK read from this module so the two tiers
always degrade to the same lists.
"""

from app.domain.enums import ConstantCategory
from app.domain.value_objects import JobConstants, Option


def _options(*pairs: tuple[str, str]) -> tuple[Option, ...]:
    return tuple(Option(value=value, label=label) for value, label in pairs)


FALLBACK_JOB_ROLES = _options(
    ("consultant", "Consultant"),
    ("project_manager", "Project Manager"),
    ("developer", "Developer"),
    ("solution_architect", "Solution Architect"),
    ("technical_architect", "Technical Architect"),
    ("business_analyst", "Business Analyst"),
    ("functional_consultant", "Functional Consultant"),
    ("technical_consultant", "Technical Consultant"),
    ("system_administrator", "System Administrator"),
    ("data_analyst", "Data Analyst"),
    ("power_platform_developer", "Power Platform Developer"),
    ("dynamics_developer", "Dynamics Developer"),
    ("sharepoint_developer", "SharePoint Developer"),
    ("integration_specialist", "Integration Specialist"),
    ("product_owner", "Product Owner"),
    ("scrum_master", "Scrum Master"),
    ("team_lead", "Team Lead"),
    ("senior_consultant", "Senior Consultant"),
    ("principal_consultant", "Principal Consultant"),
)

FALLBACK_PRIMARY_PRODUCTS = _options(
    ("power_apps", "Power Apps"),
    ("power_automate", "Power Automate"),
    ("power_bi", "Power BI"),
    ("power_pages", "Power Pages"),
    ("power_virtual_agents", "Power Virtual Agents"),
    ("dynamics_365_sales", "Dynamics 365 Sales"),
    ("dynamics_365_marketing", "Dynamics 365 Marketing"),
    ("dynamics_365_customer_service", "Dynamics 365 Customer Service"),
    ("dynamics_365_field_service", "Dynamics 365 Field Service"),
    ("dynamics_365_finance", "Dynamics 365 Finance"),
    ("dynamics_365_supply_chain", "Dynamics 365 Supply Chain Management"),
    ("dynamics_365_business_central", "Dynamics 365 Business Central"),
    ("dynamics_365_commerce", "Dynamics 365 Commerce"),
    ("dynamics_365_human_resources", "Dynamics 365 Human Resources"),
    ("microsoft_365", "Microsoft 365"),
    ("sharepoint", "SharePoint"),
    ("teams", "Microsoft Teams"),
    ("outlook", "Outlook"),
    ("excel", "Excel"),
    ("azure", "Microsoft Azure"),
    ("azure_devops", "Azure DevOps"),
    ("sql_server", "SQL Server"),
    ("dotnet", ".NET"),
    ("typescript", "TypeScript"),
    ("javascript", "JavaScript"),
    ("c_sharp", "C#"),
    ("powershell", "PowerShell"),
)

FALLBACK_JOB_TYPES = _options(
    ("full-time", "Full-time"),
    ("part-time", "Part-time"),
    ("contract", "Contract"),
    ("freelance", "Freelance"),
    ("internship", "Internship"),
)

FALLBACK_COUNTRIES = _options(
    ("US", "United States"),
    ("CA", "Canada"),
    ("UK", "United Kingdom"),
    ("DE", "Germany"),
    ("FR", "France"),
    ("AU", "Australia"),
    ("NL", "Netherlands"),
    ("SE", "Sweden"),
    ("DK", "Denmark"),
    ("NO", "Norway"),
)

_FALLBACKS: dict[ConstantCategory, tuple[Option, ...]] = {
    ConstantCategory.JOB_ROLES: FALLBACK_JOB_ROLES,
    ConstantCategory.PRIMARY_PRODUCTS: FALLBACK_PRIMARY_PRODUCTS,
    ConstantCategory.JOB_TYPES: FALLBACK_JOB_TYPES,
    ConstantCategory.COUNTRIES: FALLBACK_COUNTRIES,
}


def fallback_options(category: ConstantCategory) -> tuple[Option, ...]:
    """Return the curated options for one category."""
    return _FALLBACKS[category]


def fallback_job_constants() -> JobConstants:
    """Return the curated composite payload (all four categories)."""
    return JobConstants.from_categories(_FALLBACKS)
