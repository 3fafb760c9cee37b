from dataclasses import asdict, dataclass, fields, replace

from simulation import SimulationParams


@dataclass
class UserSettings:
    consider_fees: bool = False
    fee_rate: float = 0.5         # % per year
    consider_tax: bool = False
    is_nisa: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "UserSettings":
        """Build from saved settings; unknown keys are dropped, missing keys default."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)


def apply_settings(params: SimulationParams, settings: UserSettings,
                   taxable_rate: float = 0.0) -> SimulationParams:
    """Return params with the fee and tax toggles folded in.

    Fees only apply when consider_fees is on. The tax rate is recorded for
    taxable accounts (not NISA) but the projection does not apply it.
    """
    fees = settings.fee_rate if settings.consider_fees else 0.0
    tax_rate = taxable_rate if settings.consider_tax and not settings.is_nisa else 0.0
    return replace(params, fees=fees, tax_rate=tax_rate)
