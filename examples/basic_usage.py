"""Minimal example: build a tree, then read it back both ways."""

from __future__ import annotations

import asyncio
import logging
from pprint import pprint

from fake_fs import FakeFileSystem, FakeFsError


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    fs = FakeFileSystem()
    fs.dir("etc", mtime=1_700_000_000).file("etc/hosts", "127.0.0.1 localhost\n", "utf8")
    fs.at("home/demo").file(".gitignore", "*.pyc\n", "utf8").dir(".local")

    print("Root listing:")
    pprint(fs.readdir_sync("."))
    print("home/demo listing:")
    pprint(fs.readdir_sync("home/demo"))

    st = fs.stat_sync("etc")
    print(f"etc: directory={st.is_dir()} mtime={st.mtime}")

    async def read_async() -> None:
        done = asyncio.get_running_loop().create_future()

        def on_read(err, data) -> None:
            if err is not None:
                print(f"read failed: {err.code}")
            else:
                print("etc/hosts:", data, end="")
            done.set_result(None)

        fs.read_file("etc/hosts", on_read, encoding="utf8")
        await done

    asyncio.run(read_async())

    try:
        fs.read_file_sync("etc")
    except FakeFsError as exc:
        print("Reading a directory fails with", exc.code)


if __name__ == "__main__":
    main()
