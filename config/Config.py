# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-14
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)


@dataclass(frozen=True)
class Config:
    # Embedding model (fastembed / ONNX, loaded once per process)
    embed_model: str = "BAAI/bge-large-en-v1.5"
    embed_dim: int = 1024             # vector size the model must produce
    embed_cache_dir: str = ""
    embed_threads: int = 0            # 0 = let onnxruntime decide
    embed_batch_size: int = 32
    inference_workers: int = 1

    # Chroma Vector Database
    # - chroma_api_key set  -> Chroma Cloud (tenant + database required)
    # - chroma_host set     -> HTTP client against a Chroma server
    # - otherwise           -> local persistent client at chroma_path
    chroma_api_key: str = ""
    chroma_tenant: str = ""
    chroma_database: str = ""
    chroma_host: str = ""
    chroma_port: int = 8000
    chroma_path: str = "./data/chroma"

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Embeddings
        "embed_model": "SLATE_EMBED_MODEL",
        "embed_dim": "SLATE_EMBED_DIM",
        "embed_cache_dir": "SLATE_EMBED_CACHE_DIR",
        "embed_threads": "SLATE_EMBED_THREADS",
        "embed_batch_size": "SLATE_EMBED_BATCH_SIZE",
        "inference_workers": "SLATE_INFERENCE_WORKERS",

        # Chroma
        "chroma_api_key": "CHROMA_API_KEY",
        "chroma_tenant": "CHROMA_TENANT",
        "chroma_database": "CHROMA_DATABASE",
        "chroma_host": "CHROMA_HOST",
        "chroma_port": "CHROMA_PORT",
        "chroma_path": "CHROMA_PATH",
    }

    INT_FIELDS = ("embed_dim", "embed_threads", "embed_batch_size", "inference_workers", "chroma_port")

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables (unset vars keep defaults)."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            raw = (os.getenv(env_name) or "").strip()
            if raw == "":
                continue
            if field_name in Config.INT_FIELDS:
                try:
                    kwargs[field_name] = int(raw)
                except ValueError as e:
                    raise ValueError(f"Env var {env_name} must be an int, got {raw!r}") from e
            else:
                kwargs[field_name] = raw
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast on configuration that can never work."""
        if not self.embed_model.strip():
            raise ValueError(f"Missing required environment variable: {self.ENV_VARS['embed_model']}")

        if self.embed_dim < 1:
            raise ValueError("SLATE_EMBED_DIM must be >= 1")
        if self.embed_threads < 0:
            raise ValueError("SLATE_EMBED_THREADS must be >= 0")
        if self.embed_batch_size < 1:
            raise ValueError("SLATE_EMBED_BATCH_SIZE must be >= 1")
        if self.inference_workers < 1:
            raise ValueError("SLATE_INFERENCE_WORKERS must be >= 1")

        if self.chroma_api_key:
            missing_fields = [f for f in ("chroma_tenant", "chroma_database") if not getattr(self, f)]
            if missing_fields:
                missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
                raise ValueError(f"Missing required environment variables: {missing_env_vars}")

    @property
    def chroma_mode(self) -> str:
        if self.chroma_api_key:
            return "cloud"
        if self.chroma_host:
            return "http"
        return "persistent"

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "embed_model": self.embed_model,
            "embed_dim": self.embed_dim,
            "embed_threads": self.embed_threads,
            "embed_batch_size": self.embed_batch_size,
            "inference_workers": self.inference_workers,
            "chroma_mode": self.chroma_mode,
            "chroma_tenant": self.chroma_tenant,
            "chroma_database": self.chroma_database,
            "chroma_host": self.chroma_host,
            "chroma_port": self.chroma_port,
            "chroma_path": self.chroma_path,
        }
