import os
import yaml
from typing import Dict, List
from server.config import settings
from server.models.learning_path import LearningModule, LearningPath, Resource


def _template_path(template_id: str) -> str:
    return os.path.join(settings.TEMPLATES_DIR, f"{template_id}.yaml")


def load_path_template(template_id: str) -> LearningPath:
    """Load a learning path template from a YAML file"""
    template_path = _template_path(template_id)

    if os.path.basename(template_id) != template_id or not os.path.exists(template_path):
        raise FileNotFoundError(f"Path template {template_id} not found")

    with open(template_path, 'r', encoding='utf-8') as file:
        template_data = yaml.safe_load(file)

    modules = [
        LearningModule(
            id=str(module_data.get('id', idx + 1)),
            title=module_data['title'],
            description=module_data.get('description', '').strip(),
            estimated_hours=module_data.get('estimated_hours', 0),
            resources=[Resource(**resource) for resource in module_data.get('resources', [])],
        )
        for idx, module_data in enumerate(template_data.get('modules', []))
    ]

    return LearningPath(
        title=template_data['path_title'],
        description=template_data['path_description'].strip(),
        modules=modules,
    )


def list_path_templates() -> List[Dict[str, str]]:
    """List template ids with their title and description"""
    if not os.path.isdir(settings.TEMPLATES_DIR):
        return []

    template_ids = sorted(
        f.replace('.yaml', '') for f in os.listdir(settings.TEMPLATES_DIR) if f.endswith('.yaml')
    )
    templates = []
    for template_id in template_ids:
        path = load_path_template(template_id)
        templates.append({
            "id": template_id,
            "title": path.title,
            "description": path.description,
        })
    return templates
