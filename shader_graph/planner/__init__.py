# Ordering: stage passes and the postorder traversal
