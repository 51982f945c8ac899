from pwsh_bootstrap.cli import entrypoint

entrypoint()
