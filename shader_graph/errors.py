"""
Custom exceptions for Shader Graph.

This module provides a hierarchy of exceptions for better error handling
and debugging. Use specific exceptions for clearer error messages.

Exception Hierarchy:
    ShaderGraphError (base)
    ├── GraphError
    │   ├── NodeNotFoundError
    │   ├── InvalidConnectionError
    │   └── ValueTypeError
    ├── CompilationError
    │   ├── GraphCycleError
    │   └── CodeGenerationError
    ├── RegistryMissError
    └── PersistenceError
"""


class ShaderGraphError(Exception):
    """Base exception for all Shader Graph errors."""
    pass


# =============================================================================
# Graph Errors
# =============================================================================

class GraphError(ShaderGraphError):
    """Base exception for graph editing errors."""
    pass


class NodeNotFoundError(GraphError):
    """Raised when a node, input or output id is not part of the graph."""

    def __init__(self, message: str, node_id: int = None):
        super().__init__(message)
        self.node_id = node_id


class InvalidConnectionError(GraphError):
    """
    Raised when a connection cannot be made.

    Attributes:
        output_id: The producing output slot
        input_id: The consuming input slot
    """

    def __init__(self, message: str, output_id: int = None, input_id: int = None):
        super().__init__(message)
        self.output_id = output_id
        self.input_id = input_id


class ValueTypeError(GraphError):
    """Raised when a literal value does not fit the socket's DataType."""

    def __init__(self, message: str, socket: str = None):
        super().__init__(message)
        self.socket = socket


# =============================================================================
# Compilation Errors
# =============================================================================

class CompilationError(ShaderGraphError):
    """Base exception for ordering/code generation errors."""
    pass


class GraphCycleError(CompilationError):
    """
    Raised when the traversal re-enters a node that is still on its path.

    Attributes:
        node_id: The node closing the cycle
        path: Node ids along the cycle, starting at the repeated node
    """

    def __init__(self, message: str, node_id: int = None, path: tuple = ()):
        super().__init__(message)
        self.node_id = node_id
        self.path = tuple(path)

    def format_path(self) -> str:
        """Format the cycle as 'a -> b -> a'."""
        if not self.path:
            return str(self)
        return " -> ".join(str(n) for n in self.path + (self.node_id,))


class CodeGenerationError(CompilationError):
    """Raised when a node cannot be turned into a statement."""

    def __init__(self, message: str, node_id: int = None):
        super().__init__(message)
        self.node_id = node_id


# =============================================================================
# Registry / Persistence Errors
# =============================================================================

class RegistryMissError(ShaderGraphError):
    """
    Raised when a NodeKind has no registry entry.

    This is a programmer error: the registry is total over NodeKind.
    """

    def __init__(self, message: str, kind=None):
        super().__init__(message)
        self.kind = kind


class PersistenceError(ShaderGraphError):
    """Raised when a saved graph document cannot be read back."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
