"""`recur` - detection, clustering and periodicity analysis of recurring objects.

Subpackages:
- frames: Grid buffer, token reader, frame-sequence loading, object detection
- tracking: Shape clustering, rotation comparators, periodicity detection
- pipeline: Per-level processing, result formatting, batch runner
- schemas: Pydantic configuration models
- contracts: Stage-boundary invariant enforcement
"""

__version__ = "0.1.0"
