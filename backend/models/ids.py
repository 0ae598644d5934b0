import uuid


# Opaque string ids; random so concurrent creations never collide
def new_id() -> str:
    return uuid.uuid4().hex
