"""
Session State Management
========================
Encapsulates all Streamlit session state interactions.
"""
from datetime import date
from typing import Optional, TYPE_CHECKING

import streamlit as st

from duty_rota.roster import Roster

if TYPE_CHECKING:
    from duty_rota.models.assignment import Rota
    from duty_rota.models.unavailability import DraftUnavailability
    from duty_rota.engine.validation import ValidationResult
    from duty_rota.io.holidays import HolidayFetchResult


class SessionStateManager:
    """Manages type-safe access to session state."""

    @staticmethod
    def init_state():
        """Initialize default session state values."""
        today = date.today()
        defaults = {
            "roster": None,
            "rota": None,
            "validation": None,
            "rota_config": None,
            "holidays": None,
            # Edit session
            "editing_employee": None,
            "draft": None,
            # Config defaults
            "config_year": today.year,
            "config_month": today.month - 1,
            "config_seed": 0,
        }

        for key, value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = value
        if st.session_state["roster"] is None:
            st.session_state["roster"] = Roster()

    @property
    def roster(self) -> Roster:
        return st.session_state["roster"]

    @property
    def rota(self) -> Optional['Rota']:
        return st.session_state.get("rota")

    @rota.setter
    def rota(self, value: Optional['Rota']):
        st.session_state["rota"] = value

    @property
    def rota_config(self) -> Optional[dict]:
        """Config the current rota was generated with."""
        return st.session_state.get("rota_config")

    @rota_config.setter
    def rota_config(self, value: Optional[dict]):
        st.session_state["rota_config"] = value

    @property
    def validation(self) -> Optional['ValidationResult']:
        return st.session_state.get("validation")

    @validation.setter
    def validation(self, value: Optional['ValidationResult']):
        st.session_state["validation"] = value

    @property
    def holidays(self) -> Optional['HolidayFetchResult']:
        return st.session_state.get("holidays")

    @holidays.setter
    def holidays(self, value: 'HolidayFetchResult'):
        st.session_state["holidays"] = value

    @property
    def editing_employee(self) -> Optional[str]:
        return st.session_state.get("editing_employee")

    @property
    def draft(self) -> Optional['DraftUnavailability']:
        return st.session_state.get("draft")

    @draft.setter
    def draft(self, value: 'DraftUnavailability'):
        st.session_state["draft"] = value

    @property
    def year(self) -> int:
        return int(st.session_state.get("config_year", date.today().year))

    @property
    def month_index(self) -> int:
        return int(st.session_state.get("config_month", date.today().month - 1))

    @property
    def seed(self) -> Optional[int]:
        seed = st.session_state.get("config_seed", 0)
        return None if not seed else int(seed)

    def start_edit(self, name: str):
        """Open (or toggle off) the unavailability editor for an employee."""
        if self.editing_employee == name:
            self.cancel_edit()
            return
        st.session_state["editing_employee"] = name
        st.session_state["draft"] = self.roster.start_edit(name)

    def save_edit(self):
        name = self.editing_employee
        if name is not None and self.draft is not None:
            self.roster.save_edit(name, self.draft)
        self.cancel_edit()

    def cancel_edit(self):
        st.session_state["editing_employee"] = None
        st.session_state["draft"] = None

    def remove_employee(self, name: str):
        """Remove an employee; an open edit session for them is discarded."""
        self.roster.remove_employee(name)
        if self.editing_employee == name:
            self.cancel_edit()

    def clear_results(self):
        """Clear the generated rota."""
        st.session_state["rota"] = None
        st.session_state["validation"] = None
        st.session_state["rota_config"] = None
