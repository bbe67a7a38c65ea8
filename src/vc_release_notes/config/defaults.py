"""
Built-in changelog configuration.

Used when no configuration document is supplied. The layout mirrors the
document format accepted by :func:`vc_release_notes.config.loader.load_config`.
"""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_CONFIG: Dict[str, Any] = {
    "template": "## Новые изменения\n\n$changes",
    "groups": [
        {"title": "Новая функциональность", "icon": ":sparkles:", "types": ["feat", "feature"]},
        {"title": "Исправление багов", "icon": ":bug:", "types": ["fix", "bugfix"]},
        {"title": "Повышение производительности", "icon": ":zap:", "types": ["perf", "optimize"]},
        {"title": "Рефакторинг", "icon": ":recycle:", "types": ["refactor", "code-clean"]},
        {"title": "Тесты", "icon": ":white_check_mark:", "types": ["test", "tests"]},
        {"title": "Сборка системы", "icon": ":construction_worker:", "types": ["build", "ci"]},
        {"title": "Изменения в документации", "icon": ":memo:", "types": ["doc", "docs"]},
        {"title": "Изменения стиля кода", "icon": ":art:", "types": ["style"]},
        {"title": "Рутина", "icon": ":wrench:", "types": ["chore"]},
        {"title": "Остальные изменения", "icon": ":flying_saucer:", "types": ["other"]},
        {"title": "Откат изменений", "icon": ":x:", "types": ["revert"]},
    ],
    "skips": ["skip", "skip-ci"],
    "excludeTypes": [],
}
