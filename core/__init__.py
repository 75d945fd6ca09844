"""Django app serving the creatorStudio analytics dashboard."""
