"""Account and catalog collaborators: models, balance, profile, usage.

Each lookup kind has its own registry (``MODELS_PROVIDERS`` and friends)
with ``pollinations`` built in; register additional providers per kind.
"""

from .balance import BALANCE_PROVIDERS, BalanceProvider, PollinationsBalanceProvider
from .catalog import (
    MODELS_PROVIDERS,
    ModelsProvider,
    PollinationsModelsProvider,
    filter_free_models,
    filter_models_by_capability,
    filter_models_by_modality,
)
from .models import (
    AccountRequest,
    Balance,
    BalanceResponse,
    Model,
    ModelPricing,
    ModelsResponse,
    Profile,
    ProfileLimits,
    ProfileResponse,
    ProfileUsage,
    Usage,
    UsageFormat,
    UsageRecord,
    UsageRequest,
    UsageResponse,
    UsageTotals,
)
from .profile import PROFILE_PROVIDERS, PollinationsProfileProvider, ProfileProvider
from .usage import USAGE_PROVIDERS, PollinationsUsageProvider, UsageProvider, normalize_format

__all__ = [
    "AccountRequest",
    "UsageRequest",
    "UsageFormat",
    "Model",
    "ModelPricing",
    "Balance",
    "Profile",
    "ProfileUsage",
    "ProfileLimits",
    "Usage",
    "UsageRecord",
    "UsageTotals",
    "ModelsResponse",
    "BalanceResponse",
    "ProfileResponse",
    "UsageResponse",
    "ModelsProvider",
    "BalanceProvider",
    "ProfileProvider",
    "UsageProvider",
    "PollinationsModelsProvider",
    "PollinationsBalanceProvider",
    "PollinationsProfileProvider",
    "PollinationsUsageProvider",
    "MODELS_PROVIDERS",
    "BALANCE_PROVIDERS",
    "PROFILE_PROVIDERS",
    "USAGE_PROVIDERS",
    "filter_models_by_modality",
    "filter_models_by_capability",
    "filter_free_models",
    "normalize_format",
]
