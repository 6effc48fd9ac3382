from fastapi import HTTPException

from clawion.errors import NotFoundError

NO_CACHE_HEADERS = {"Cache-Control": "no-store"}


def http_error(error: Exception) -> HTTPException:
    """404 for anything not found, 400 for bad input, 500 for everything else."""
    if isinstance(error, NotFoundError):
        status = 404
    elif isinstance(error, ValueError):
        status = 400
    else:
        status = 500
    return HTTPException(status_code=status, detail=str(error))
