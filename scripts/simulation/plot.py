from matplotlib import pyplot as plt
from matplotlib.figure import Figure


def plot_scores(score_lists: list[list[int]], labels: list[str] | None = None) -> Figure:
  """Overlay one final-score histogram per agent."""
  if not labels:
    labels = [f"Run {i + 1}" for i in range(len(score_lists))]
  if len(labels) != len(score_lists):
    raise ValueError("Length of labels must match length of score_lists")

  fig = plt.figure()
  ax = fig.add_subplot(111)
  for scores, label in zip(score_lists, labels):
    ax.hist(scores, bins=20, alpha=0.5, label=label)

  ax.set_xlabel("Final score")
  ax.set_ylabel("Number of rounds")
  ax.set_title("Distribution of final scores")
  ax.legend(loc="upper left")
  ax.grid(True, linestyle="--", alpha=0.4)
  return fig


def plot_stars(star_counts: list[dict[int, int]], labels: list[str] | None = None) -> Figure:
  """Grouped bar chart of 1/2/3-star rounds per agent."""
  if not labels:
    labels = [f"Run {i + 1}" for i in range(len(star_counts))]
  if len(labels) != len(star_counts):
    raise ValueError("Length of labels must match length of star_counts")

  fig = plt.figure()
  ax = fig.add_subplot(111)
  width = 0.8 / max(1, len(star_counts))
  for i, (counts, label) in enumerate(zip(star_counts, labels)):
    xs = [stars + i * width for stars in (1, 2, 3)]
    ax.bar(xs, [counts.get(stars, 0) for stars in (1, 2, 3)], width=width, label=label)

  ax.set_xticks([stars + 0.4 - width / 2 for stars in (1, 2, 3)], ["1 star", "2 stars", "3 stars"])
  ax.set_ylabel("Number of rounds")
  ax.set_title("Star ratings")
  ax.legend(loc="upper left")
  return fig
