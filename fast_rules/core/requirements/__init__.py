from .field_requirement_constraints import FieldRequirementConstraints
from .requirement_engine import RequirementEngine, RequirementState

__all__ = [
    "FieldRequirementConstraints",
    "RequirementEngine",
    "RequirementState",
]
