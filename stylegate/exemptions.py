"""
Exemption policies.

An exempt file is reported as passing without being read. Two independent
policies decide exemption: exact file names and file name prefixes. Each
maps its pattern to a human-readable reason shown in the report.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from .config import LintConfig


class ExemptionPolicy(Protocol):
    def reason_for(self, file_name: str) -> Optional[str]:
        """Return the exemption reason for ``file_name``, or None."""
        ...


@dataclass(frozen=True)
class ExactNameExemption:
    """Exempts files whose name matches exactly."""

    names: dict[str, str] = field(default_factory=dict)

    def reason_for(self, file_name: str) -> Optional[str]:
        return self.names.get(file_name)


@dataclass(frozen=True)
class PrefixExemption:
    """Exempts files whose name starts with a configured prefix."""

    prefixes: dict[str, str] = field(default_factory=dict)

    def reason_for(self, file_name: str) -> Optional[str]:
        for prefix, reason in self.prefixes.items():
            if file_name.startswith(prefix):
                return reason
        return None


class ExemptionPolicies:
    """Ordered set of policies; the first match wins."""

    def __init__(self, policies: Sequence[ExemptionPolicy]) -> None:
        self.policies = list(policies)

    @classmethod
    def from_config(cls, config: LintConfig) -> "ExemptionPolicies":
        return cls([
            ExactNameExemption(dict(config.exempt_files)),
            PrefixExemption(dict(config.exempt_prefixes)),
        ])

    def reason_for(self, file_name: str) -> Optional[str]:
        for policy in self.policies:
            reason = policy.reason_for(file_name)
            if reason is not None:
                return reason
        return None

    def is_exempt(self, file_name: str) -> bool:
        return self.reason_for(file_name) is not None
