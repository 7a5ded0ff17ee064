"""
Complete Experiment Suite
Runs every labeling search on the sample graphs and compares the effort
"""

import time
import os
import pandas as pd
import matplotlib.pyplot as plt
from labeling.graph_loader import EdgeListLoader
from labeling.sinks import format_labeling
from labeling.visualization import LabelingVisualizer

from subset_enumeration import SubsetEnumerator
from graceful_labeling import GracefulLabeler
from wheel_graceful_labeling import WheelGracefulLabeler
from l321_labeling import L321Labeler, MinimumSpanL321

GRACEFUL_GRAPHS = ['triangle', 'path4', 'star3', 'cycle4', 'cycle5', 'k4']
L321_GRAPHS = ['path3', 'star3', 'cycle4', 'cycle5', 'k4']
WHEEL_SIZES = [3, 4, 5, 6]


def _pruning_rate(stats) -> float:
    return stats.get('constraint_pruned', 0) / max(stats.get('candidates_tried', 0), 1) * 100


def _run(results, method, graph_name, experiment):
    """Run one experiment and append its row; failures are recorded, not raised"""
    try:
        start = time.time()
        row = experiment()
        elapsed = time.time() - start

        results.append({
            'Method': method,
            'Graph': graph_name,
            'Labelings': row.get('labelings', 0),
            'Span': row.get('span'),
            'Example': row.get('example', ''),
            'Nodes Visited': row.get('nodes_visited', 0),
            'Pruning Rate (%)': row.get('pruning_rate', 0),
            'Runtime (s)': elapsed,
            'Status': 'Success'
        })
        print(f"✓ {method} on {graph_name}: {row.get('labelings', 0)} labelings in {elapsed:.2f}s")

    except Exception as e:
        print(f"✗ {method} on {graph_name} failed: {e}")
        results.append({
            'Method': method,
            'Graph': graph_name,
            'Labelings': 0,
            'Span': None,
            'Example': '',
            'Nodes Visited': 0,
            'Pruning Rate (%)': 0,
            'Runtime (s)': 0,
            'Status': f'Failed: {e}'
        })


def run_all_experiments(subset_size: int = 10, save_results: bool = True,
                        output_dir: str = 'results'):
    """
    Run every labeling problem and compare the results

    Args:
        subset_size: n for the subset enumeration experiment
        save_results: Whether to save results to files
        output_dir: Where CSV, report and figures are written

    Returns:
        (results DataFrame, example labelings by (method, graph),
         predicate stats by graceful run)
    """

    print("="*80)
    print(" "*20 + "LABELING SEARCH EXPERIMENT SUITE")
    print("="*80)

    if save_results:
        os.makedirs(output_dir, exist_ok=True)

    loader = EdgeListLoader()
    results = []
    examples = {}
    predicate_stats = {}

    # ========================================================================
    # EXPERIMENT 1: Subset enumeration
    # ========================================================================
    print("\n" + "─"*80)
    print("EXPERIMENT 1: SUBSET ENUMERATION")
    print("─"*80)

    def subsets():
        enumerator = SubsetEnumerator(subset_size)
        found = enumerator.enumerate()
        return {
            'labelings': len(found),
            'nodes_visited': enumerator.stats['nodes_visited'],
            'pruning_rate': _pruning_rate(enumerator.stats)
        }

    _run(results, 'Subsets', f'n={subset_size}', subsets)

    # ========================================================================
    # EXPERIMENT 2: Graceful labelings
    # ========================================================================
    print("\n" + "─"*80)
    print("EXPERIMENT 2: GRACEFUL LABELINGS")
    print("─"*80)

    for name in GRACEFUL_GRAPHS:
        def graceful(name=name):
            graph = loader.load_sample(name)
            labeler = GracefulLabeler(graph)
            found = labeler.enumerate()
            predicate_stats[name] = labeler.predicate_stats
            if found:
                examples[('Graceful', name)] = (graph, found[0])
            return {
                'labelings': len(found),
                'example': format_labeling(found[0]) if found else '',
                'nodes_visited': labeler.stats['nodes_visited'],
                'pruning_rate': _pruning_rate(labeler.stats)
            }

        _run(results, 'Graceful', name, graceful)

    # ========================================================================
    # EXPERIMENT 3: Wheel graphs with symmetry reduction
    # ========================================================================
    print("\n" + "─"*80)
    print("EXPERIMENT 3: WHEEL GRACEFUL LABELINGS")
    print("─"*80)

    for n in WHEEL_SIZES:
        def wheel(n=n):
            labeler = WheelGracefulLabeler(n)
            found = labeler.generate()
            predicate_stats[f'W_{n}'] = labeler.predicate_stats
            if found:
                examples[('Wheel', f'W_{n}')] = (labeler.graph, found[0])
            return {
                'labelings': len(found),
                'example': format_labeling(found[0]) if found else '',
                'nodes_visited': labeler.stats['nodes_visited'],
                'pruning_rate': _pruning_rate(labeler.stats)
            }

        _run(results, 'Wheel (reduced)', f'W_{n}', wheel)

    # ========================================================================
    # EXPERIMENT 4: Minimum span L(3,2,1)
    # ========================================================================
    print("\n" + "─"*80)
    print("EXPERIMENT 4: MINIMUM SPAN L(3,2,1)-LABELINGS")
    print("─"*80)

    for name in L321_GRAPHS:
        def min_span(name=name):
            graph = loader.load_sample(name)
            solver = MinimumSpanL321(graph)
            labeling = solver.find()
            examples[('L(3,2,1)', name)] = (graph, labeling)
            count = len(L321Labeler(graph, solver.span).enumerate())
            return {
                'labelings': count,
                'span': solver.span,
                'example': format_labeling(labeling),
                'nodes_visited': solver.stats['nodes_visited']
            }

        _run(results, 'L(3,2,1) min span', name, min_span)

    # ========================================================================
    # COMPARISON RESULTS
    # ========================================================================
    print("\n" + "="*80)
    print(" "*25 + "COMPARATIVE RESULTS")
    print("="*80)

    df = pd.DataFrame(results)
    print("\n" + df.to_string(index=False))

    successful_results = df[df['Status'] == 'Success']

    if len(successful_results) > 0:
        largest_idx = successful_results['Nodes Visited'].idxmax()
        print(f"\n🌳 Largest search tree: {successful_results.loc[largest_idx, 'Method']} "
              f"on {successful_results.loc[largest_idx, 'Graph']}")
        print(f"   Nodes: {successful_results.loc[largest_idx, 'Nodes Visited']:,}")

        slowest_idx = successful_results['Runtime (s)'].idxmax()
        print(f"\n⏱  Slowest run: {successful_results.loc[slowest_idx, 'Method']} "
              f"on {successful_results.loc[slowest_idx, 'Graph']}")
        print(f"   Runtime: {successful_results.loc[slowest_idx, 'Runtime (s)']:.2f}s")

    # ========================================================================
    # SAVE RESULTS
    # ========================================================================
    if save_results:
        print("\n" + "="*80)
        print("SAVING RESULTS")
        print("="*80)

        csv_path = os.path.join(output_dir, 'comparison_results.csv')
        df.to_csv(csv_path, index=False)
        print(f"\n✓ Saved comparison table to '{csv_path}'")

        report_path = os.path.join(output_dir, 'experiment_report.txt')
        with open(report_path, 'w') as f:
            f.write("LABELING SEARCH - EXPERIMENT REPORT\n")
            f.write("="*80 + "\n\n")
            f.write(f"Experiments Run: {len(results)}\n")
            f.write(f"Successful: {len(successful_results)}\n\n")
            f.write("RESULTS:\n")
            f.write("-"*80 + "\n")
            f.write(df.to_string(index=False))
            f.write("\n")
        print(f"✓ Saved detailed report to '{report_path}'")

        visualizer = LabelingVisualizer()

        stats_list = []
        method_names = []
        for _, row in successful_results.iterrows():
            stats_list.append({
                'runtime': row['Runtime (s)'],
                'solutions_found': row['Labelings'],
                'nodes_visited': row['Nodes Visited'],
                'pruning_rate': row['Pruning Rate (%)']
            })
            method_names.append(f"{row['Method']}\n{row['Graph']}")

        if stats_list:
            fig = visualizer.plot_search_performance(stats_list, method_names)
            fig.savefig(os.path.join(output_dir, 'method_comparison.png'), dpi=150, bbox_inches='tight')
            print(f"✓ Saved comparison chart to '{output_dir}/method_comparison.png'")

        if predicate_stats:
            fig = visualizer.plot_predicate_pruning(predicate_stats)
            fig.savefig(os.path.join(output_dir, 'predicate_pruning.png'), dpi=150, bbox_inches='tight')
            print(f"✓ Saved predicate chart to '{output_dir}/predicate_pruning.png'")

        plt.close('all')

        for (method, name), (graph, labeling) in examples.items():
            hub = 0 if method == 'Wheel' else None
            visualizer.plot_labeled_graph(graph, labeling, title=f"{method}: {name}", hub=hub)
        if examples:
            visualizer.save_all_plots(os.path.join(output_dir, 'labelings'))
        plt.close('all')

    print("\n" + "="*80)
    print("EXPERIMENTS COMPLETE")
    print("="*80)
    print(f"\nTotal successful experiments: {len(successful_results)}/{len(results)}")
    print("="*80 + "\n")

    return df, examples, predicate_stats


def main():
    """Main execution"""
    run_all_experiments(subset_size=10, save_results=True)


if __name__ == "__main__":
    main()
