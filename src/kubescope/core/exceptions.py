class KubeScopeError(Exception):
    """Base exception for KubeScope."""

    pass


class QuantityDecodeError(KubeScopeError, ValueError):
    """Raised when a CPU or memory field cannot be decoded in strict mode."""

    pass


class KubectlError(KubeScopeError):
    """Raised when a kubectl invocation fails (non-zero exit, stderr, timeout or bad JSON)."""

    def __init__(self, message: str, command: str | None = None, stderr: str | None = None):
        super().__init__(message)
        self.command = command
        self.stderr = stderr


class InvalidKubeconfigError(KubectlError):
    """Raised when a kubeconfig path is outside the allowed directory."""

    pass
