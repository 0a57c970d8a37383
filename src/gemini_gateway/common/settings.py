"""Gateway settings from environment, .env and an optional YAML file."""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

DEFAULT_MODEL_ID = "models/gemini-2.5-flash"
DEFAULT_CONFIG_PATH = "configs/gateway.yaml"

DEFAULT_PROMPTS = {
    "image": "Desc Image",
    "document": "Analyse",
    "audio": "Transcribe the following audio",
}

def load_cfg(path: str) -> dict[str, Any]:
    """
    Load a YAML config file.

    Args:
        path: Path to YAML file. A missing file yields an empty config.
    """
    p = Path(path)
    if not p.exists():
        return {}
    with open(p, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    model_id: str = DEFAULT_MODEL_ID
    host: str = "0.0.0.0"
    port: int = 3000
    upload_dir: Path = Path("uploads")
    prompts: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PROMPTS))

    def prompt_for(self, kind: str) -> str:
        return self.prompts.get(kind) or DEFAULT_PROMPTS[kind]

    @classmethod
    def from_env(cls, cfg_path: str | None = None, env_file: str | None = ".env") -> "Settings":
        """
        Build settings; env vars win over YAML values.

        Args:
            cfg_path: YAML path, defaults to $GATEWAY_CONFIG or configs/gateway.yaml.
            env_file: dotenv file read from the working directory; None skips it.
                Values already in the environment are never overridden.
        """
        if env_file is not None:
            load_dotenv(env_file)
        cfg = load_cfg(cfg_path or os.getenv("GATEWAY_CONFIG", DEFAULT_CONFIG_PATH))

        prompts = dict(DEFAULT_PROMPTS)
        prompts.update({k: str(v) for k, v in (cfg.get("prompts") or {}).items() if v})

        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or cfg.get("api_key"),
            model_id=os.getenv("GEMINI_MODEL_ID") or cfg.get("model_id") or DEFAULT_MODEL_ID,
            host=os.getenv("HOST") or cfg.get("host") or "0.0.0.0",
            port=int(os.getenv("PORT") or cfg.get("port") or 3000),
            upload_dir=Path(os.getenv("UPLOAD_DIR") or cfg.get("upload_dir") or "uploads"),
            prompts=prompts,
        )
