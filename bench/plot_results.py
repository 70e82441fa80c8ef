"""Plot benchmark results from CSV produced by bench/suite.py"""
import csv
from collections import defaultdict

import matplotlib.pyplot as plt


def load_rows(path='bench/results.csv'):
    data = []
    with open(path) as f:
        reader = csv.DictReader(f)
        for r in reader:
            r['time_sec'] = float(r['time_sec'])
            r['nodes_expanded'] = int(r['nodes_expanded'])
            r['path_len'] = int(r['path_len'])
            data.append(r)
    return data


def plot_csv(path='bench/results.csv', show=True):
    groups = defaultdict(list)
    for r in load_rows(path):
        groups[r['map_type']].append(r)

    figures = []
    for map_type, rows in groups.items():
        fig = plt.figure(figsize=(8, 4))
        for s in sorted(set(r['solver'] for r in rows)):
            rs = [r for r in rows if r['solver'] == s]
            plt.scatter([r['nodes_expanded'] for r in rs], [r['time_sec'] for r in rs], label=s)
        plt.xlabel('nodes_expanded')
        plt.ylabel('time_sec')
        plt.title(map_type)
        plt.legend()
        plt.grid(True)
        plt.tight_layout()
        figures.append(fig)
    if show:
        plt.show()
    return figures


if __name__ == '__main__':
    plot_csv()
