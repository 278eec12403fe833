"""NIF lookup orchestration.

Combines the offline checksum and the remote status into a single
`NifReport`. The two checks are independent: a locally invalid identifier
is still looked up remotely, so the caller sees both verdicts. Side-effects
(printing, exit codes) stay in the CLI layer.
"""

from __future__ import annotations

from core.domain.models import NifReport
from core.domain.nif import is_nif_valid_local
from core.interfaces.checker import NifStatusChecker


def lookup_nif(
    nif: str,
    *,
    checker: NifStatusChecker | None = None,
    offline: bool = False,
) -> NifReport:
    if offline:
        return NifReport(nif=nif, local_valid=is_nif_valid_local(nif))

    if checker is None:
        raise ValueError("a checker is required unless offline=True")

    return NifReport(
        nif=nif,
        local_valid=is_nif_valid_local(nif),
        remote_status=checker.check(nif),
        lookup_url=checker.build_url(nif),
    )
