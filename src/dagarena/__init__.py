__all__ = [
    "BaseReporter",
    "CycleDetected",
    "Dag",
    "DagException",
    "InvalidNodeReference",
    "Node",
    "NodeId",
    "__version__",
]

__version__ = "0.1.0dev0"


from .exceptions import CycleDetected, DagException, InvalidNodeReference
from .graphs import Dag
from .reporters import BaseReporter
from .structs import Node, NodeId
