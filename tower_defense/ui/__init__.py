"""
Presentation adapters for Tower Defense. Thin wrappers over pygame.
"""
