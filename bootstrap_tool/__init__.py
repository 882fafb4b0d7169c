# bootstrap_tool/__init__.py

"""
Node.js project bootstrapper.

CLI entrypoints:
- bootstrap-tool --directory <path>   (python -m bootstrap_tool.cli)
- hello-world                         (python -m bootstrap_tool.listing)

The bootstrapper drives git, npm and npx through a fixed pipeline:
- preflight checks for required programs and the target directory
- git init, npm init and the package.json module-system field
- interactive dependency selection validated against the npm registry
- scaffold files (.gitignore, EditorConfig, Prettier, ESLint, README)
- a single "Add project skeleton" commit
"""

__version__ = "1.0.0"
