"""
Visualization utilities for labelings and search results
"""

import os
import matplotlib.pyplot as plt
import numpy as np
from typing import List, Dict, Sequence

try:
    from .graph_loader import Graph
except ImportError:
    from graph_loader import Graph


class LabelingVisualizer:
    """Visualize labeled graphs and search statistics"""

    def __init__(self, figsize=(12, 8)):
        self.figsize = figsize
        plt.style.use('seaborn-v0_8-darkgrid' if 'seaborn-v0_8-darkgrid' in plt.style.available else 'default')

    @staticmethod
    def circular_layout(graph: Graph, hub: int = None) -> np.ndarray:
        """Vertices evenly spaced on the unit circle; hub (if any) at the origin"""
        n = graph.order()
        positions = np.zeros((n, 2))
        ring = [v for v in range(n) if v != hub]

        angles = np.linspace(0, 2 * np.pi, len(ring), endpoint=False) + np.pi / 2
        for v, angle in zip(ring, angles):
            positions[v] = (np.cos(angle), np.sin(angle))

        return positions

    def plot_labeled_graph(self, graph: Graph, labeling: Sequence[int],
                           title: str = "Labeled Graph", hub: int = None,
                           show_edge_labels: bool = True):
        """Draw graph with vertex labels and |difference| edge labels"""

        positions = self.circular_layout(graph, hub)
        fig, ax = plt.subplots(figsize=self.figsize)

        for u, v in graph.edges:
            xs = [positions[u, 0], positions[v, 0]]
            ys = [positions[u, 1], positions[v, 1]]
            ax.plot(xs, ys, color='gray', linewidth=1.5, zorder=1)

            if show_edge_labels:
                mid = (positions[u] + positions[v]) / 2
                ax.text(mid[0], mid[1], str(abs(labeling[u] - labeling[v])),
                        fontsize=9, color='darkred', ha='center', va='center',
                        bbox=dict(boxstyle='round,pad=0.15', fc='white', ec='none'))

        ax.scatter(positions[:, 0], positions[:, 1], s=600, c='skyblue',
                   edgecolors='black', zorder=2)

        for v in range(graph.order()):
            ax.text(positions[v, 0], positions[v, 1], str(labeling[v]),
                    fontsize=11, fontweight='bold', ha='center', va='center', zorder=3)

        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_aspect('equal')
        ax.axis('off')
        plt.tight_layout()

        return fig

    def plot_predicate_pruning(self, predicate_stats: Dict[str, List[Dict]]):
        """
        Rejections per predicate for each search run

        predicate_stats maps a run name to the predicate stats of that run
        (ConstraintManager.get_all_stats); one bar group per run, one bar
        per predicate, annotated with its rejection rate
        """

        runs = list(predicate_stats)
        predicates = []
        for stats in predicate_stats.values():
            for s in stats:
                if s['name'] not in predicates:
                    predicates.append(s['name'])

        x = np.arange(len(runs))
        width = 0.8 / max(len(predicates), 1)

        fig, ax = plt.subplots(figsize=self.figsize)

        for i, name in enumerate(predicates):
            by_run = [{s['name']: s for s in predicate_stats[run]}.get(name) for run in runs]
            prunes = [s['prunes'] if s else 0 for s in by_run]
            offset = (i - (len(predicates) - 1) / 2) * width
            bars = ax.bar(x + offset, prunes, width, label=name, alpha=0.7, edgecolor='black')

            for bar, s in zip(bars, by_run):
                if s and s['checks']:
                    ax.annotate(f"{s['prune_rate']*100:.0f}%",
                                (bar.get_x() + bar.get_width() / 2, bar.get_height()),
                                ha='center', va='bottom', fontsize=8)

        ax.set_xticks(x)
        ax.set_xticklabels(runs, rotation=45, ha='right')
        ax.set_ylabel('Candidates Rejected')
        ax.set_title('Predicate Rejections per Run', fontsize=14, fontweight='bold')
        ax.legend()
        ax.grid(True, alpha=0.3, axis='y')
        plt.tight_layout()

        return fig

    def plot_search_performance(self, stats_list: List[Dict],
                                method_names: List[str]):
        """Compare search effort across problems"""

        fig, axes = plt.subplots(2, 2, figsize=self.figsize)

        runtimes = [s.get('runtime', 0) for s in stats_list]
        axes[0, 0].bar(method_names, runtimes, color='skyblue', alpha=0.7, edgecolor='black')
        axes[0, 0].set_ylabel('Runtime (seconds)')
        axes[0, 0].set_title('Runtime Comparison')
        axes[0, 0].tick_params(axis='x', rotation=45)
        axes[0, 0].grid(True, alpha=0.3, axis='y')

        solutions = [s.get('solutions_found', 0) for s in stats_list]
        axes[0, 1].bar(method_names, solutions, color='lightgreen', alpha=0.7, edgecolor='black')
        axes[0, 1].set_ylabel('Labelings Found')
        axes[0, 1].set_title('Number of Labelings')
        axes[0, 1].tick_params(axis='x', rotation=45)
        axes[0, 1].grid(True, alpha=0.3, axis='y')

        nodes = [s.get('nodes_visited', 0) for s in stats_list]
        axes[1, 0].bar(method_names, nodes, color='gold', alpha=0.7, edgecolor='black')
        axes[1, 0].set_ylabel('Nodes Visited')
        axes[1, 0].set_title('Search Tree Size')
        axes[1, 0].tick_params(axis='x', rotation=45)
        axes[1, 0].grid(True, alpha=0.3, axis='y')

        pruning_rates = [s.get('pruning_rate', 0) for s in stats_list]
        axes[1, 1].bar(method_names, pruning_rates, color='coral', alpha=0.7, edgecolor='black')
        axes[1, 1].set_ylabel('Pruning Rate (%)')
        axes[1, 1].set_title('Pruning Efficiency')
        axes[1, 1].tick_params(axis='x', rotation=45)
        axes[1, 1].grid(True, alpha=0.3, axis='y')

        plt.suptitle('Labeling Search Comparison', fontsize=14, fontweight='bold')
        plt.tight_layout()

        return fig

    def plot_span_attempts(self, attempts: List[Dict], title: str = "Minimum Span Search"):
        """Bounds tried by the minimum-span search and the work each one took"""

        bounds = [a['max_label'] for a in attempts]
        nodes = [a['nodes_visited'] for a in attempts]
        colors = ['green' if a['found'] else 'red' for a in attempts]

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.bar([str(b) for b in bounds], nodes, color=colors, alpha=0.7, edgecolor='black')
        ax.set_xlabel('Maximum Label')
        ax.set_ylabel('Nodes Visited')
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.grid(True, alpha=0.3, axis='y')
        plt.tight_layout()

        return fig

    def save_all_plots(self, output_dir: str = './results'):
        """Save all current figures"""
        os.makedirs(output_dir, exist_ok=True)

        for i, fig_num in enumerate(plt.get_fignums()):
            fig = plt.figure(fig_num)
            fig.savefig(f'{output_dir}/figure_{i+1}.png', dpi=150, bbox_inches='tight')

        print(f"✓ Saved {len(plt.get_fignums())} figures to {output_dir}")
