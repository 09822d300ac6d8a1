from __future__ import annotations

import errno as _errno


def is_device_missing(exc: BaseException) -> bool:
    """Check for a LED directory or attribute that does not exist.

    sysfs reports a vanished device as ENOENT when the directory is gone and
    as ENODEV when the driver unbinds while a file is open.
    """

    if isinstance(exc, FileNotFoundError):
        return True

    code = getattr(exc, "errno", None)
    return code in (_errno.ENOENT, _errno.ENODEV, _errno.ENOTDIR)


def is_permission_denied(exc: BaseException) -> bool:
    """Check for permission failures on sysfs attributes.

    Writes to LED attributes normally need root or a udev rule granting the
    user's group write access.
    """

    if isinstance(exc, PermissionError):
        return True

    code = getattr(exc, "errno", None)
    return code in (_errno.EPERM, _errno.EACCES)


def errno_of(exc: BaseException, default: int = _errno.EIO) -> int:
    code = getattr(exc, "errno", None)
    if isinstance(code, int):
        return code
    return default
