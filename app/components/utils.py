import streamlit as st

from duty_rota.models.config import RotaConfig
from duty_rota.models.rules import RULES
from duty_rota.models.validated import ValidatedRotaConfig


def get_rota_config() -> RotaConfig:
    """Build RotaConfig from session state, validated at the UI boundary."""
    seed = st.session_state.get("config_seed", 0)
    validated = ValidatedRotaConfig(
        seed=int(seed) if seed else None,
        max_assignments_per_employee=st.session_state.get(
            "cfg_max_per_employee", RULES.max_assignments_per_employee
        ),
        # Holiday feed
        fetch_holidays=st.session_state.get("cfg_fetch_holidays", True),
        holiday_division=st.session_state.get("cfg_holiday_division", RULES.holiday_division),
    )
    return validated.to_dataclass()
