"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, merged over the defaults."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            overrides = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            overrides = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    return merge_config(get_default_config(), overrides or {})


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'prediction': {
            'min_history': 3,
            'similarity_threshold': 0.3,
            'max_similar_tasks': 10,
            'strong_history_count': 5,
            'high_priority_cutoff': 3,
        },
        'heuristic': {
            'base_duration_ms': 180000,  # 3 minutes
            'title_char_ms': 50,
            'priority_step_ms': 30000,
            'subtask_factor': 0.3,
            'confidence': 0.4,
            'default_category_multiplier': 1.3,
            'category_multipliers': {
                'research': 1.5,
                'planning': 1.2,
                'execution': 1.8,
                'testing': 1.4,
                'documentation': 1.0,
                'optimization': 2.0,
            },
        },
        'features': {
            'default_priority': 5,
            'default_category_complexity': 4,
            'category_complexity': {
                'research': 4,
                'planning': 3,
                'execution': 6,
                'testing': 5,
                'documentation': 2,
                'optimization': 7,
            },
        },
        'agent_speed': {
            'developer': 0.9,
            'designer': 1.1,
            'researcher': 1.3,
            'manager': 0.8,
            'analyst': 1.0,
            'general': 1.0,
        },
        'forecast': {
            'sequential_overhead': 1.2,
            'low_confidence': 0.5,
            'long_task_ms': 600000,  # 10 minutes
            'bottleneck_ms': 900000,  # 15 minutes
            'max_bottlenecks': 3,
            'high_risk_ratio': 0.5,
            'medium_risk_ratio': 0.25,
        },
        'velocity': {
            'window_days': 7,
        },
        'generator': {
            'objective_count': 12,
            'tasks_per_objective': [3, 8],
            'history_days': 14,
            'completion_rate': 0.7,
        },
    }
