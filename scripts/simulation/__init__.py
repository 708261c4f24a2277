from .core import SimulationRecord, run_simulations
from .extractors import EXTRACTORS
from .plot import plot_scores, plot_stars
from .utils import get_simulation_config, instantiate_agents, load_records, play_and_save, save_records

__all__ = [
  "SimulationRecord", "run_simulations", "EXTRACTORS", "plot_scores", "plot_stars",
  "get_simulation_config", "instantiate_agents", "load_records", "play_and_save", "save_records",
]
