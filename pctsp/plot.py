from typing import List

import matplotlib.pyplot as plt

from .problem import DEPOT, Problem


def plot_tour(problem: Problem, tour: List[int], filename: str, title: str = ''):
    f, ax = plt.subplots()
    ax.set_title(title or f'#Stops = {len(set(tour))}')

    all_x = [loc.lon for loc in problem.locations]
    all_y = [loc.lat for loc in problem.locations]
    ax.scatter(all_x, all_y, c='lightgray', zorder=1)

    x = [problem.locations[i].lon for i in tour]
    y = [problem.locations[i].lat for i in tour]
    ax.plot(x, y, "o-", zorder=2)

    depot = problem.locations[DEPOT]
    ax.plot([depot.lon], [depot.lat], "s", c='red', zorder=3)

    ax.set_xlabel('longitude')
    ax.set_ylabel('latitude')

    f.savefig(filename, dpi=250)
    plt.close(f)
