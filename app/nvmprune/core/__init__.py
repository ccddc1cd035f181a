"""Core logic for nvmprune: nvm environment, selection, and workflows."""
