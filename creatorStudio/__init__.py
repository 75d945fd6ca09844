"""Django project package for creatorStudio."""
