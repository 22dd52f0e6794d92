"""Service for rendering the submission history as HTML."""

from pathlib import Path
from typing import Optional, Sequence
from jinja2 import Environment, FileSystemLoader, select_autoescape
from profile_form.models.form_models import FormSnapshot
from profile_form.utils.template_helpers import register_jinja_filters


class HistoryRenderer:
    """Service to render submitted snapshots from Jinja2 templates."""
    
    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize the history renderer.
        
        Args:
            template_dir: Directory containing Jinja2 templates. Defaults to profile_form/templates/
        """
        if template_dir is None:
            package_dir = Path(__file__).parent.parent
            template_dir = package_dir / "templates"
        
        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html', 'xml'])
        )
        register_jinja_filters(self.env)
    
    def generate_html(self, snapshots: Sequence[FormSnapshot]) -> str:
        """
        Render the submitted-data table.
        
        Args:
            snapshots: Submission history, oldest first
            
        Returns:
            str: HTML table, or an empty string when nothing was submitted
        """
        if not snapshots:
            return ""
        template = self.env.get_template("submissions.html")
        return template.render(rows=list(snapshots))
