"""
Role decorators for function-based views.
"""
from functools import wraps

from rest_framework import status
from rest_framework.response import Response


def _unauthenticated():
    return Response(
        {'detail': 'Authentication required'},
        status=status.HTTP_401_UNAUTHORIZED
    )


def _forbidden(roles):
    return Response(
        {'detail': f"Permission denied: requires role {' or '.join(str(r) for r in roles)}"},
        status=status.HTTP_403_FORBIDDEN
    )


def require_role(*roles):
    """
    Decorator that allows the view only for users holding one of ``roles``.

    Args:
        *roles: UserRole values (e.g. UserRole.HR)

    Usage:
        @api_view(['PUT', 'DELETE'])
        @require_role(UserRole.HR)
        def assignment_detail(request, pk):
            ...

    Instance-level decisions (whose evaluation is this?) belong to
    HR.evaluation.access; this decorator only gates whole endpoints.
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return _unauthenticated()

            if request.user.role not in roles:
                return _forbidden(roles)

            return view_func(request, *args, **kwargs)

        wrapper.required_roles = roles
        return wrapper
    return decorator


def require_role_for_methods(method_roles):
    """
    Decorator that gates only some HTTP methods by role.

    Args:
        method_roles: dict of HTTP method -> tuple of allowed roles. Methods
            not listed are open to any authenticated user.

    Usage:
        @api_view(['GET', 'POST'])
        @require_role_for_methods({'POST': (UserRole.HR,)})
        def assignment_list(request):
            # GET for everyone (role-scoped in the view), POST for HR only
            ...
    """
    def decorator(view_func):
        @wraps(view_func)
        def wrapper(request, *args, **kwargs):
            if not request.user.is_authenticated:
                return _unauthenticated()

            allowed = method_roles.get(request.method)
            if allowed is not None and request.user.role not in allowed:
                return _forbidden(allowed)

            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator
