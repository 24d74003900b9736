import pathlib

OS_RELEASE = pathlib.Path("/etc/os-release")


def read_os_release(path=OS_RELEASE):
    data = {}
    if not path.exists():
        return data
    for line in path.read_text().splitlines():
        if "=" not in line or line.startswith("#"):
            continue
        k, v = line.split("=", 1)
        data[k] = v.strip().strip('"')
    return data


def is_arch_based(path=OS_RELEASE):
    """True on Arch and derivatives (ID=arch/manjaro/... or ID_LIKE containing arch)."""
    data = read_os_release(path)
    id_ = data.get("ID", "").lower()
    like = data.get("ID_LIKE", "").lower().split()
    return id_ in ("arch", "manjaro", "endeavouros", "garuda") or "arch" in like
