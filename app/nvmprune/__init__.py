"""nvmprune - prune Node.js versions installed with nvm.

Removes unused Node versions, optionally reviews their global npm
packages, and keeps the current and explicitly kept versions untouched.
"""

__version__ = "0.1.0"
