from dataclasses import dataclass, field
from pathlib import Path

from memo.typings import DifficultyId

from .utils import PathLike, instantiate_agents, play_and_save


@dataclass(frozen=True)
class RunConfig:
  agents: list[str]
  difficulty: str
  n_games: int
  think_seconds: float = 0.5

  def filename(self, agent_name: str) -> str:
    return f"run_[{agent_name}]_{self.difficulty}.jsonl"

  def exec(self, base_dir: PathLike) -> list[Path]:
    print(f"Run {self.n_games} {self.difficulty} rounds with agents {self.agents}")
    files: list[Path] = []
    for agent in instantiate_agents(self.agents):
      output_file = Path(base_dir) / self.filename(agent.name)
      play_and_save(agent, DifficultyId(self.difficulty), count=self.n_games,
                    think_seconds=self.think_seconds, output_file=output_file)
      files.append(output_file)
    return files


@dataclass(frozen=True)
class PlotConfig:
  extractors: list[str] = field(default_factory=lambda: ["extract_scores", "extract_star_counts"])


@dataclass()
class SimulationConfig:
  run_config: RunConfig
  plot_config: PlotConfig

  def __init__(self, config_data: dict):
    self.run_config = RunConfig(**config_data["run"])
    self.plot_config = PlotConfig(**config_data.get("plot", {}))
