"""Keyword signatures and the canned findings they produce."""

from dataclasses import dataclass
from typing import Callable

from models.findings import Finding, Severity


@dataclass(frozen=True)
class Signature:
    """
    A keyword rule.

    Matches when any keyword occurs in the lowercased input. ``build``
    returns a new Finding each call so results never share state.
    """

    name: str
    keywords: tuple[str, ...]
    build: Callable[[], Finding]

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(k in lowered for k in self.keywords)


K8S_HARDENING_SCRIPT = """# Kubernetes Hardening
securityContext:
  privileged: false
  allowPrivilegeEscalation: false
  capabilities:
    drop:
      - ALL
"""

SECRET_ROTATION_SCRIPT = """# Bash - Find and Replace Secret (Example)
# DO NOT RUN WITHOUT BACKUP
sed -i 's/password123/${DB_PASSWORD}/g' config.yaml
"""


def _privileged_container() -> Finding:
    return Finding(
        id="k8s-priv-1",
        title="Privileged Container Detected",
        severity=Severity.HIGH,
        description="The container is configured with privileged access, which disables many security isolations.",
        affected_component="Deployment Spec",
        remediation_explanation="Set `privileged: false` in the securityContext. Use capabilities instead.",
        remediation_script=K8S_HARDENING_SCRIPT,
    )


def _hardcoded_secret() -> Finding:
    return Finding(
        id="sec-leak-1",
        title="Potential Hardcoded Secret",
        severity=Severity.CRITICAL,
        description="A pattern resembling a secret or password was found in the plain text.",
        affected_component="Source Code / Config",
        remediation_explanation="Rotate the secret immediately. Use a secrets manager (Vault, AWS Secrets Manager).",
        remediation_script=SECRET_ROTATION_SCRIPT,
    )


def general_info() -> Finding:
    """Fallback when no signature matched."""
    return Finding(
        id="gen-1",
        title="Input Analysis Info",
        severity=Severity.LOW,
        description="No critical signatures matched in the provided snippet. Manual review recommended.",
        affected_component="General Input",
        remediation_explanation="Ensure this input is validated against a schema.",
    )


# Order is the order findings are reported in
SIGNATURES: tuple[Signature, ...] = (
    Signature(
        name="privileged_container",
        keywords=("privileged: true", "securitycontext"),
        build=_privileged_container,
    ),
    Signature(
        name="hardcoded_secret",
        keywords=("password", "secret", "key"),
        build=_hardcoded_secret,
    ),
)
