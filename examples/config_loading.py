"""config_loading.py"""
import sys

from cmdopts.config import loader

cmd = loader("cmdopts.yaml")

if __name__ == "__main__":
    if not cmd.init_from_sys():
        print("\n".join(cmd.get_errors()))
        print(cmd.get_helpstring())
        sys.exit(1)

    print(cmd.to_dict())
