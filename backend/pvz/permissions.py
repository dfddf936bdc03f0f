# Overview: Roles and the static operation -> allowed-roles table.
# Every protected route names one operation; the decorator checks it once.


class Role:
    """Operator roles carried in tokens."""
    EMPLOYEE = "employee"
    MODERATOR = "moderator"

    ALL = (EMPLOYEE, MODERATOR)


# -- OPERATIONS --

CREATE_PVZ = "CREATE_PVZ"
LIST_PVZ = "LIST_PVZ"
OPEN_RECEPTION = "OPEN_RECEPTION"
CLOSE_RECEPTION = "CLOSE_RECEPTION"
ADD_PRODUCT = "ADD_PRODUCT"
DELETE_PRODUCT = "DELETE_PRODUCT"


OPERATION_ROLES = {
    CREATE_PVZ: frozenset({Role.MODERATOR}),
    LIST_PVZ: frozenset({Role.EMPLOYEE, Role.MODERATOR}),
    OPEN_RECEPTION: frozenset({Role.EMPLOYEE}),
    CLOSE_RECEPTION: frozenset({Role.EMPLOYEE}),
    ADD_PRODUCT: frozenset({Role.EMPLOYEE}),
    DELETE_PRODUCT: frozenset({Role.EMPLOYEE}),
}


def validate_operation_code(code: str) -> bool:
    """Check if an operation code is known."""
    return code in OPERATION_ROLES


def allowed_roles(code: str) -> frozenset:
    return OPERATION_ROLES[code]


def is_permitted(role: str, code: str) -> bool:
    """Unknown operations permit nobody."""
    return role in OPERATION_ROLES.get(code, frozenset())
