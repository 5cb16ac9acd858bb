"""Kubernetes integration custom exceptions."""

from __future__ import annotations


class KubernetesError(Exception):
    """Base exception for Kubernetes operations.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from Kubernetes API (if applicable).
        resource_type: Type of resource involved (e.g., "Pod", "Node").
        namespace: Namespace the request was scoped to (if applicable).
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubernetesError.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code from Kubernetes API.
            resource_type: Type of resource involved.
            namespace: Namespace the request was scoped to.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.resource_type = resource_type
        self.namespace = namespace

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        if self.resource_type:
            loc = f"[{self.resource_type}"
            if self.namespace:
                loc += f" in {self.namespace}"
            loc += "]"
            parts.append(loc)
        return " ".join(parts)


class KubernetesConnectionError(KubernetesError):
    """Exception raised when connection to a Kubernetes cluster fails.

    This includes missing credentials, kubeconfig issues, and unreachable API servers.
    """

    def __init__(
        self,
        message: str = "Failed to connect to Kubernetes cluster",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize KubernetesConnectionError.

        Args:
            message: Human-readable error message.
            original_error: The original exception that caused this error.
        """
        super().__init__(message=message)
        self.original_error = original_error


class KubernetesAuthError(KubernetesError):
    """Exception raised when authentication or authorization fails.

    This includes invalid tokens, expired certificates, and RBAC denials (401/403).
    """

    def __init__(
        self,
        message: str = "Kubernetes authentication/authorization failed",
        status_code: int | None = 401,
        reason: str | None = None,
    ) -> None:
        """Initialize KubernetesAuthError.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code (usually 401 or 403).
            reason: Kubernetes API reason string.
        """
        super().__init__(message=message, status_code=status_code)
        self.reason = reason


class KubernetesNotFoundError(KubernetesError):
    """Exception raised when a requested resource collection is not served.

    This is a 404 response from the Kubernetes API.
    """

    def __init__(
        self,
        message: str = "Kubernetes resource not found",
        resource_type: str | None = None,
        namespace: str | None = None,
    ) -> None:
        """Initialize KubernetesNotFoundError.

        Args:
            message: Human-readable error message.
            resource_type: Type of resource (e.g., "Pod", "Event").
            namespace: Namespace the request was scoped to.
        """
        if resource_type:
            message = f"{resource_type} collection not found"
            if namespace:
                message += f" in namespace '{namespace}'"
        super().__init__(
            message=message,
            status_code=404,
            resource_type=resource_type,
            namespace=namespace,
        )


class KubernetesTimeoutError(KubernetesError):
    """Exception raised when a request to the API server times out."""

    def __init__(
        self,
        message: str = "Kubernetes operation timed out",
        timeout_seconds: int | None = None,
    ) -> None:
        """Initialize KubernetesTimeoutError.

        Args:
            message: Human-readable error message.
            timeout_seconds: The timeout value that was exceeded.
        """
        if timeout_seconds:
            message = f"{message} (after {timeout_seconds}s)"
        super().__init__(message=message)
        self.timeout_seconds = timeout_seconds


class KubernetesConfigError(KubernetesError):
    """Exception raised when the tool's own configuration is invalid."""

    def __init__(self, message: str = "Invalid kubeai-doctor configuration") -> None:
        super().__init__(message=message)


class InvalidResourceKindError(ValueError):
    """Raised when a resource kind string names no supported check."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid resource '{value}'. Use 'nodes', 'pods', 'services', or 'events'."
        )
        self.value = value
