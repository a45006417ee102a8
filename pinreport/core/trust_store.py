"""Trust store — pins trusted for the API endpoint and its proxy fronts.

The pin set is built once at import time and never reloaded.  Components
that validate or report take it as an injected value; there is no
mutation API.
"""

from __future__ import annotations

from pinreport.models.pins import PinSet, TrustedPin

# The proxy pins are shared by every proxy server.
TRUSTED_API_PINS = PinSet(
    pins=(
        TrustedPin(token='pin-sha256="drtmcR2kFkM8qJClsuWgUzxgBkePfRCkRpqUesyDmeE="', label="current"),
        TrustedPin(token='pin-sha256="YRGlaY0jyJ4Jw2/4M8FIftwbDIQfh8Sdro96CeEel54="', label="hot"),
        TrustedPin(token='pin-sha256="AfMENBVvOS8MnISprtvyPsjKlPooqh8nMB/pvCrpJpw="', label="cold"),
        TrustedPin(token='pin-sha256="EU6TS9MO0L/GsDHvVc9D5fChYLNy5JdGYpJw0ccgetM="', label="proxy main"),
        TrustedPin(token='pin-sha256="iKPIHPnDNqdkvOnTClQ8zQAIKG0XavaPkcEo0LBAABA="', label="proxy backup 1"),
        TrustedPin(token='pin-sha256="MSlVrBCdL0hKyczvgYVSRNm88RicyY04Q2y5qrBt0xA="', label="proxy backup 2"),
        TrustedPin(token='pin-sha256="C2UxW0T1Ckl9s+8cXfjXxlEqwAfPM4HiW2y3UdtBeCw="', label="proxy backup 3"),
    )
)


def default_trust_store() -> PinSet:
    """Return the process-wide trusted pin set."""
    return TRUSTED_API_PINS
