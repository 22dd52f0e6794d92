"""Service for loading the form layout from YAML files."""

import yaml
from pathlib import Path
from typing import Optional
from profile_form.config import get_settings
from profile_form.models.layout_models import FormLayout


class FormLayoutLoader:
    """Service to load and validate the form layout from a YAML file."""
    
    def __init__(self, layout_file: Optional[Path] = None):
        """
        Initialize the layout loader.
        
        Args:
            layout_file: YAML file describing the fields. Defaults to the
                PROFILE_FORM_LAYOUT_FILE setting, then profile_form/data/form-fields.yaml
        """
        if layout_file is None:
            configured = get_settings().layout_file
            if configured:
                layout_file = Path(configured)
            else:
                # Get the package directory (parent of services)
                package_dir = Path(__file__).parent.parent
                layout_file = package_dir / "data" / "form-fields.yaml"
        self.layout_file = Path(layout_file)
    
    def load_layout(self) -> FormLayout:
        """
        Load the form layout.
        
        Returns:
            FormLayout: Validated layout
            
        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            ValueError: If the YAML or the layout structure is invalid
        """
        filepath = self.layout_file
        
        if not filepath.exists():
            raise FileNotFoundError(
                f"Form layout file not found: {filepath}. "
                f"Expected file at: {filepath.absolute()}"
            )
        
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML format in {filepath}: {e}")
        
        if not isinstance(data, dict):
            raise ValueError(f"Invalid form layout in {filepath}: expected a mapping")
        
        try:
            return FormLayout(**data)
        except Exception as e:
            raise ValueError(
                f"Invalid form layout structure in {filepath}. "
                f"Validation error: {e}"
            )


# Singleton instance
_layout_loader: Optional[FormLayoutLoader] = None


def get_layout_loader(layout_file: Optional[Path] = None) -> FormLayoutLoader:
    """
    Get or create the layout loader singleton.
    
    Args:
        layout_file: Optional YAML file path
        
    Returns:
        FormLayoutLoader: The loader instance
    """
    global _layout_loader
    if _layout_loader is None:
        _layout_loader = FormLayoutLoader(layout_file)
    return _layout_loader
