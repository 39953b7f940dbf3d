"""
Deterministic requirement templates for mock mode.

Used when no provider credential is configured. Keyword checks run in a
fixed priority order, so every input maps to exactly one template.
"""

from typing import Any, Dict, Tuple

from .schemas import Entity, Feature, GenerationResult, UserRole

TASK_KEYWORDS = ("todo", "task")
STORE_KEYWORDS = ("ecommerce", "shop", "store")

_USER = Entity(name="User", attributes=["id", "name", "email", "createdAt"])

GENERIC_TEMPLATE = GenerationResult(
    appName="My App",
    entities=[
        _USER,
        Entity(name="Item", attributes=["id", "title", "description", "status"]),
    ],
    userRoles=[
        UserRole(name="Admin", description="Can manage all aspects of the application"),
        UserRole(name="User", description="Can interact with their own data"),
    ],
    features=[
        Feature(name="User Management", description="Create and manage user accounts"),
        Feature(name="Data Management", description="Add, edit, and delete items"),
        Feature(name="Authentication", description="Secure login and logout functionality"),
    ],
)

TASK_MANAGER_TEMPLATE = GenerationResult(
    appName="Task Manager",
    entities=[
        _USER,
        Entity(
            name="Task",
            attributes=["id", "title", "description", "status", "dueDate", "priority"],
        ),
        Entity(name="Project", attributes=["id", "name", "description", "createdAt"]),
    ],
    userRoles=[
        UserRole(name="Admin", description="Can manage all tasks and projects"),
        UserRole(name="User", description="Can manage their own tasks and projects"),
    ],
    features=[
        Feature(name="Task Creation", description="Create and assign tasks"),
        Feature(name="Task Management", description="Update task status and priority"),
        Feature(name="Project Organization", description="Group tasks into projects"),
        Feature(name="Due Date Tracking", description="Set and track task deadlines"),
    ],
)

STOREFRONT_TEMPLATE = GenerationResult(
    appName="E-commerce Store",
    entities=[
        Entity(name="User", attributes=["id", "name", "email", "address", "phone"]),
        Entity(
            name="Product",
            attributes=["id", "name", "description", "price", "category", "inventory"],
        ),
        Entity(name="Order", attributes=["id", "userId", "total", "status", "createdAt"]),
        Entity(name="OrderItem", attributes=["id", "orderId", "productId", "quantity", "price"]),
    ],
    userRoles=[
        UserRole(name="Admin", description="Can manage products, orders, and users"),
        UserRole(name="Customer", description="Can browse products and place orders"),
    ],
    features=[
        Feature(name="Product Catalog", description="Browse and search products"),
        Feature(name="Shopping Cart", description="Add items to cart and checkout"),
        Feature(name="Order Management", description="Track order status and history"),
        Feature(name="User Authentication", description="Secure user registration and login"),
    ],
)

# Priority order: first matching keyword group wins
_KEYWORD_TEMPLATES: Tuple[Tuple[Tuple[str, ...], GenerationResult], ...] = (
    (TASK_KEYWORDS, TASK_MANAGER_TEMPLATE),
    (STORE_KEYWORDS, STOREFRONT_TEMPLATE),
)


def select_template(text: str) -> GenerationResult:
    lowered = text.lower()
    for keywords, template in _KEYWORD_TEMPLATES:
        if any(keyword in lowered for keyword in keywords):
            return template
    return GENERIC_TEMPLATE


def build_mock_result(text: str) -> Dict[str, Any]:
    """Return a fresh GenerationResult dict for the template matching text."""
    return select_template(text).model_dump()
