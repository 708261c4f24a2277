from pathlib import Path
import tomllib
from typing import TypeAlias

from tqdm import tqdm

from memo.agents.core import Agent, AgentBuilder
from memo.typings import DifficultyId
from .core import SimulationRecord, run_simulations

PathLike: TypeAlias = str | Path


def get_simulation_config(filename: PathLike = "simulation_config.toml"):
  from .config import SimulationConfig
  with open(filename, "rb") as f:
    data = tomllib.load(f)
  return SimulationConfig(data)


def play_and_save(agent: Agent, difficulty: DifficultyId, *, count: int = 100, think_seconds: float = 0.5,
                  output_file: PathLike) -> None:
  output_file = Path(output_file)
  if output_file.exists():
    return
  records = run_simulations(count, difficulty, agent, think_seconds=think_seconds)
  save_records(records, output_file)


def save_records(records: list[SimulationRecord], output_file: PathLike, mode="a"):
  output_file = Path(output_file)
  output_file.parent.mkdir(parents=True, exist_ok=True)
  with open(output_file, mode, encoding="utf-8") as f:
    for r in records:
      f.write(f"{r.model_dump_json()}\n")


def load_records(input_file: PathLike, start: int | None = None, end: int | None = None) -> list[SimulationRecord]:
  with open(input_file, "r", encoding="utf-8") as f:
    lines = list(f)
  if end is not None:
    lines = lines[:end]
  if start is not None:
    lines = lines[start:]
  res = []
  for data in tqdm(lines, desc="Loading records"):
    r = SimulationRecord.model_validate_json(data)
    res.append(r.model_copy(update={"filename": str(input_file)}))
  return res


def instantiate_agents(agent_names: list[str]) -> list[Agent]:
  """Instantiate agents from their class names."""
  return [AgentBuilder(cls_name=name, seed=i).build() for i, name in enumerate(agent_names)]
