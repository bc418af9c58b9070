# Graph data model: DataType, NodeKind and the editable Graph.
# Submodules are imported directly (ir.types, ir.kinds, ir.graph).
