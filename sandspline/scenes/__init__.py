"""Built-in scenes. Importing a module registers its scene."""
