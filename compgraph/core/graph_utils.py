"""
Graph inspection helpers
Print and analyse the structure of an expression graph
"""

import numpy as np
from typing import Dict, Mapping, Optional
from collections import Counter

from ..config import GraphConfig
from .handle import NodeHandle


def _fan_outs(graph) -> list:
    fan_outs = [0] * len(graph)
    for _, node in graph:
        for child in node.children:
            fan_outs[child.index] += 1
    return fan_outs


def get_graph_stats(graph) -> Dict:
    """
    Collect graph statistics without printing.

    Returns:
        dict with node/edge counts, fan-in/fan-out figures and a count per op_tag
    """
    if len(graph) == 0:
        return {
            'nodes': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(graph)
    fan_ins = [len(node.children) for _, node in graph]
    fan_outs = _fan_outs(graph)
    op_counter = Counter(node.op_tag for _, node in graph)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(graph, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph.

    Args:
        graph: the Graph to summarise
        detailed: also list the nodes (only for graphs up to
                  GraphConfig.detailed_max_nodes nodes)

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(graph)
    if stats['nodes'] == 0:
        print("Empty computation graph")
        return stats

    n_nodes = stats['nodes']
    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= GraphConfig.detailed_max_nodes:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for handle, node in graph:
            child_info = ", ".join(f"Node{c.index}" for c in node.children)
            print(f"Node {handle.index:3d}: {node.op_tag:12s} <- [{child_info}]")

    print("="*70 + "\n")
    return stats


def print_computation_graph(graph, max_nodes: Optional[int] = None,
                            values: Optional[Mapping[NodeHandle, float]] = None) -> None:
    """
    Print the graph one node per line.

    Args:
        graph: the Graph to print
        max_nodes: how many nodes to show (default GraphConfig.print_max_nodes)
        values: optional result of evaluate(); shown next to each node
    """
    if max_nodes is None:
        max_nodes = GraphConfig.print_max_nodes

    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    if len(graph) == 0:
        print("Empty graph")
        return

    for handle, node in graph:
        if handle.index >= max_nodes:
            break
        val = ""
        if values is not None and handle in values:
            val = f"({float(values[handle]):10.6f}) "
        if node.children:
            child_info = ", ".join(f"Node{c.index}" for c in node.children)
            print(f"Node {handle.index:4d}: {node.op_tag:12s} {val}<- [{child_info}]")
        else:
            print(f"Node {handle.index:4d}: {node.op_tag:12s} {val}[leaf/input]")

    if len(graph) > max_nodes:
        print(f"... ({len(graph) - max_nodes} more nodes)")

    print("="*70 + "\n")


def analyze_graph_complexity(graph) -> str:
    """
    Analyse graph size and return a short text report.
    """
    stats = get_graph_stats(graph)

    if stats['nodes'] == 0:
        return "Empty computation graph"

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"

    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)


def count_paths(graph, target: NodeHandle) -> int:
    """
    Number of distinct paths from any leaf to `target`.

    A leaf counts as one path to itself; every other node sums the counts of
    its children (a child listed twice counts twice). Counts are memoised in
    one ascending pass, so the cost is linear in the edges even when the
    number of paths grows exponentially with depth.
    """
    counts = []
    for handle, node in graph:
        if handle.index > target.index:
            break
        if node.children:
            counts.append(sum(counts[c.index] for c in node.children))
        else:
            counts.append(1)
    return counts[target.index]
