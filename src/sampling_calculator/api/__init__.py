"""
Sampling Calculator API - Business Logic Layer

This package contains the sampling engine and its collaborators, separated
from CLI presentation concerns.

- models: rig configuration and result value objects
- sampling: pixel scale, field of view, classification and recommendations
- validation: per-field input checks
- presets: named telescope/camera/rig configurations stored as JSON
- url_state: compact query-string encoding of a configuration
- core: constants, enums, and exceptions
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__: list[str] = []
