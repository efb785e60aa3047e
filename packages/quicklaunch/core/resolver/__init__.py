"""URL resolution: redirect following and identity derivation."""

from quicklaunch.core.resolver.models import ResolvedIdentity
from quicklaunch.core.resolver.resolver import (
    SiteResolver,
    apply_identity_provider_rule,
    identity_from_url,
)

__all__ = [
    "ResolvedIdentity",
    "SiteResolver",
    "apply_identity_provider_rule",
    "identity_from_url",
]
