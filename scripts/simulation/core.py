from pydantic import BaseModel
from tqdm import tqdm

from memo.agents.core import Agent
from memo.consts import GameConfig
from memo.engine import Engine
from memo.play import play_round
from memo.scheduler import VirtualScheduler
from memo.typings import DifficultyId, RoundSummary


class SimulationRecord(BaseModel):
  agent: dict
  seed: int
  summary: RoundSummary
  filename: str | None = None

  @property
  def difficulty(self) -> DifficultyId:
    return self.summary.difficulty


def run_simulations(n: int, difficulty: DifficultyId | str, agent: Agent, *, think_seconds: float = 0.5,
                    config: GameConfig | None = None, debug: bool = False) -> list[SimulationRecord]:
  """Play `n` independent rounds of `difficulty` with `agent`.

  Every round gets a fresh deck and the agent is reseeded with
  `1234 + i`, so agent choices are reproducible while decks are not.
  """
  scheduler = VirtualScheduler()
  engine = Engine(scheduler=scheduler, difficulty=difficulty, config=config)
  result: list[SimulationRecord] = []
  for i in tqdm(range(n), desc=f"Running {agent.name} on {difficulty}"):
    seed = 1234 + i
    agent.reset(seed=seed)
    engine.restart()
    summary = play_round(engine, agent, scheduler, think_seconds=think_seconds, debug=debug)
    result.append(SimulationRecord(agent=agent.metadata(), seed=seed, summary=summary))
  return result
