"""Helper functions for Jinja2 templates."""

from typing import Iterable, Optional
from jinja2 import Environment


def join_skills(skills: Optional[Iterable[str]], separator: str = ", ") -> str:
    """
    Join skill tags for display.
    
    Example: ("Go", "SQL") -> "Go, SQL"
    
    Args:
        skills: Skill tags in entry order
        separator: Text placed between tags
        
    Returns:
        str: Joined tags, empty string for no skills
    """
    if not skills:
        return ""
    return separator.join(str(skill) for skill in skills)


def capitalize_option(value: Optional[str]) -> str:
    """Display form of an option value ("female" -> "Female")."""
    if not value:
        return ""
    return str(value)[:1].upper() + str(value)[1:]


def register_jinja_filters(env: Environment) -> None:
    """
    Register helper functions as Jinja2 filters.
    
    Args:
        env: Jinja2 Environment instance
    """
    env.filters['join_skills'] = join_skills
    env.filters['capitalize_option'] = capitalize_option
