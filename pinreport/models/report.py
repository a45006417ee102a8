"""Pin mismatch report model, after RFC 7469 §3 pin-validation reports.

Field names follow Python conventions; the wire names used by the report
collection endpoint are carried as aliases.  Serialize with
``model_dump(by_alias=True)`` (or the helpers in
``pinreport.core.serialization``) to obtain the wire payload.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MismatchReport(BaseModel):
    """A single failed pin validation, ready to be posted.

    Built once per detected mismatch by ``build_report`` and discarded after
    submission.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Time of the failed validation, RFC 3339.
    observed_at: str = Field(alias="date-time")

    # Host and port of the original request that failed pin validation.
    hostname: str
    port: int

    # When the noted pins are considered stale, RFC 3339.
    pin_expiry: str = Field(alias="effective-expiration-date")

    # Whether includeSubDomains was noted for the known pinned host.
    include_subdomains: bool = Field(default=False, alias="include-subdomains")

    # Host under which the pin set was noted; may differ from hostname when
    # a parent domain was pinned with includeSubDomains.
    noted_hostname: str = Field(alias="noted-hostname")

    # PEM certificates as served by the peer during the handshake.
    served_chain: tuple[str, ...] = Field(
        default=(), alias="served-certificate-chain"
    )

    # PEM certificates as built by the local verifier.  May differ from
    # the served chain.
    validated_chain: tuple[str, ...] = Field(
        default=(), alias="validated-certificate-chain"
    )

    # known-pin = token "=" quoted-string, e.g. pin-sha256="..."
    known_pins: tuple[str, ...] = Field(default=(), alias="known-pins")

    # Echoed into the x-pm-appversion header as well.
    app_version: str = Field(alias="app-version")
