from kubeplan.infrastructure.tools.git.git_cli_client import GitCliClient

__all__ = ["GitCliClient"]
