"""
Graph Configuration

Shared defaults for graph construction, evaluation and reporting.
"""

import numpy as np


class GraphConfig:
    """Shared configuration for graphs and the evaluation engine"""

    # Validate handles on append/lookup. Follows the interpreter's debug
    # flag, so `python -O` turns the checks off.
    check_handles: bool = __debug__

    # Scalar type every computed or bound value is stored as
    dtype = np.float64

    # Number of nodes shown by print_computation_graph
    print_max_nodes: int = 20

    # Upper bound on nodes listed by print_graph_summary(detailed=True)
    detailed_max_nodes: int = 100
