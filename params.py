"""Filesystem cache for serialized proving parameters (KZG SRS over BN254).

Blobs live at ``{dir}/kzg_bn254_{k}.srs``. ``dir`` resolves in this order:

  1. the ``directory`` argument, if given;
  2. env var ``PARAMS_DIR``;
  3. ``./params``.

The SRS bytes are opaque here: generating them belongs to the caller's
``setup(k)`` function.
"""

import logging  # cache hit/miss events
import os  # env-var lookup
import pathlib  # filesystem paths

logger = logging.getLogger(__name__)

PARAMS_DIR_ENV = "PARAMS_DIR"  # directory override
DEFAULT_PARAMS_DIR = "./params"

class ParamsNotFoundError(FileNotFoundError):  # Raised when a params file is required but absent.
    pass

def resolve_params_dir(directory=None):  # Resolve the params directory.
    if directory is not None:
        return pathlib.Path(directory)
    return pathlib.Path(os.environ.get(PARAMS_DIR_ENV) or DEFAULT_PARAMS_DIR)

def params_path(k, directory=None):  # Path of the SRS blob for circuit size 2^k.
    k = int(k)
    if k < 0:
        raise ValueError("k must be non-negative")
    return resolve_params_dir(directory) / f"kzg_bn254_{k}.srs"

def read_params(k, directory=None):  # Read an existing SRS blob.
    path = params_path(k, directory)
    if not path.exists():
        raise ParamsNotFoundError(f"params file does not exist: {path}")
    return path.read_bytes()

def read_or_create_srs(k, setup, directory=None):  # Read the SRS blob, or create it with setup(k) and cache it.
    path = params_path(k, directory)
    if path.exists():
        logger.info("read params from %s", path)
        return path.read_bytes()
    logger.info("creating params for k=%d at %s", int(k), path)
    blob = bytes(setup(int(k)))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(blob)
    return blob
