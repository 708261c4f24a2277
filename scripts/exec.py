# %%
from pathlib import Path

from _common import RES_DIR
from simulation import EXTRACTORS, get_simulation_config, load_records, plot_scores, plot_stars

Simulation_Dir = RES_DIR / "simulations"
Output_Dir = RES_DIR / "output"

# %%
config = get_simulation_config(Path(__file__).parent / "simulation_config.toml")
files = config.run_config.exec(Simulation_Dir)
results = [load_records(f) for f in files]
labels = [f.stem for f in files]

# %%
for name in config.plot_config.extractors:
  if name not in EXTRACTORS:
    raise ValueError(f"Extractor '{name}' not found.")

for records, label in zip(results, labels):
  print(f"{label}: win rate {EXTRACTORS['extract_win_rate'](records):.1%}")

Output_Dir.mkdir(parents=True, exist_ok=True)
if "extract_scores" in config.plot_config.extractors:
  fig = plot_scores([EXTRACTORS["extract_scores"](r) for r in results], labels=labels)
  fig.savefig(Output_Dir / "scores.png")
if "extract_star_counts" in config.plot_config.extractors:
  fig = plot_stars([EXTRACTORS["extract_star_counts"](r) for r in results], labels=labels)
  fig.savefig(Output_Dir / "stars.png")
