"""Public suffix list lookups: public suffixes, registrable domains and cookie domain matching."""

from .config import Config, load_config, validate_config
from .exceptions import PslCacheNotFoundError, PslDownloadError, RegDomError
from .normalize import NormalizedHost, normalize_host
from .provider import (
    SuffixListProvider,
    domain_matches,
    get_provider,
    get_public_suffix,
    get_registered_domain,
    is_public_suffix,
    metadata,
    set_provider,
)
from .registered import RegisteredDomain
from .rules import Rule, RuleKind, parse_rules
from .suffix import PublicSuffixList
from .tree import RuleTree

__version__ = "1.0.0"

__all__ = [
    "Config",
    "load_config",
    "validate_config",
    "PslCacheNotFoundError",
    "PslDownloadError",
    "RegDomError",
    "NormalizedHost",
    "normalize_host",
    "SuffixListProvider",
    "domain_matches",
    "get_provider",
    "get_public_suffix",
    "get_registered_domain",
    "is_public_suffix",
    "metadata",
    "set_provider",
    "RegisteredDomain",
    "Rule",
    "RuleKind",
    "parse_rules",
    "PublicSuffixList",
    "RuleTree",
]
