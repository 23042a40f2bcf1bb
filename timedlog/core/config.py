"""
Location : timedlog/core/config.py
Purpose  : Load & merge YAML configs → immutable ConfigSnapshot; env overrides supported.
Inputs   : <config dir>/base.yaml + <config dir>/profiles/<profile>.yaml (optional)
Outputs  : ConfigSnapshot (frozen pydantic model)
Notes    : Precedence base → profile → env CFG__SECTION__KEY.
           Config dir defaults to ./configs next to the package; TIMEDLOG_CONFIG_DIR overrides it.
"""
from __future__ import annotations
import os, copy, yaml
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "configs")

def config_dir() -> str:
    return os.environ.get("TIMEDLOG_CONFIG_DIR") or CONFIG_DIR

def _load_yaml(path: str, required: bool = True) -> dict:
    if not required and not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def _deep_merge(a: dict, b: dict) -> dict:
    res = copy.deepcopy(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(res.get(k), dict):
            res[k] = _deep_merge(res[k], v)
        else:
            res[k] = v
    return res

def _apply_env_overrides(cfg: dict) -> dict:
    # ENV format: CFG__section__sub__key=value  → cfg['section']['sub']['key']=parsed(value)
    for k, v in os.environ.items():
        if not k.startswith("CFG__"):
            continue
        path = k[5:].split("__")
        cur = cfg
        for p in path[:-1]:
            cur = cur.setdefault(p, {})
        val = v
        if v.lower() in ("true", "false"):
            val = v.lower() == "true"
        else:
            try:
                if "." in v: val = float(v)
                else: val = int(v)
            except ValueError:
                pass
        cur[path[-1]] = val
    return cfg

class ConfigSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    app: dict = Field(default_factory=dict)
    logging: dict = Field(default_factory=dict)
    directories: dict = Field(default_factory=dict)
    playback: dict = Field(default_factory=dict)
    metrics: dict = Field(default_factory=dict)

    def directory(self, role: str) -> Path:
        """Path configured for a directory role ('home' | 'deploy')."""
        raw = (self.directories or {}).get(role)
        if not raw:
            raise KeyError(f"No directory configured for role '{role}'")
        return Path(os.path.expanduser(str(raw)))

def load_config(profile: Optional[str] = None) -> ConfigSnapshot:
    root = config_dir()
    profile = profile or os.environ.get("TIMEDLOG_PROFILE")
    merged = _load_yaml(os.path.join(root, "base.yaml"))
    if profile:
        prof = _load_yaml(os.path.join(root, "profiles", f"{profile}.yaml"), required=False)
        merged = _deep_merge(merged, prof)
    merged = _apply_env_overrides(merged)
    return ConfigSnapshot(**merged)
