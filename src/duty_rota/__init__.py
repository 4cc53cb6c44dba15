"""Monthly duty rota generator."""
from duty_rota.engine.generate import generate_rota
from duty_rota.models.assignment import Rota, RotaEntry
from duty_rota.roster import Roster

__version__ = "0.1.0"

__all__ = ["generate_rota", "Rota", "RotaEntry", "Roster", "__version__"]
