"""Small runner that plays one round per difficulty for development.

A GreedyAgent plays on a virtual clock so the demo finishes instantly;
results land in a file-backed leaderboard under `./res`.
"""

from pathlib import Path

from memo import ConsoleSurface, Engine, FileStorage, ScoreStore, VirtualScheduler
from memo.agents import GreedyAgent, GreedyAgentConfig
from memo.play import play_round
from memo.typings import DifficultyId


if __name__ == "__main__":
  scheduler = VirtualScheduler()
  store = ScoreStore(FileStorage(Path(__file__).parent / "res"))
  engine = Engine(scheduler=scheduler, store=store, surface=ConsoleSurface(show_tiles=False))
  agent = GreedyAgent(seed=0, config=GreedyAgentConfig(recall=0.8))

  for difficulty in DifficultyId:
    print(f"\n=== {difficulty} ===")
    engine.set_difficulty(difficulty)
    agent.reset(seed=0)
    summary = play_round(engine, agent, scheduler)
    engine.print_summary()
    print(f"{summary.outcome}: {summary.stars_text} {summary.score} pts")
