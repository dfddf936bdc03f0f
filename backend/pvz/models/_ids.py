import uuid


def new_id() -> str:
    """Primary keys are opaque UUID strings."""
    return str(uuid.uuid4())
