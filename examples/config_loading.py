"""config_loading.py"""
import sys
from pathlib import Path

from clia.config import load_declarations

declarations = load_declarations(Path(__file__).parent / "clia.yaml")

if __name__ == "__main__":
    parser = declarations.parse(sys.argv)
    for option in parser.get_option_arguments_found():
        print(option.flags, option.present, option.get_list() or option.get_data())
    for parameter in parser.get_parameter_arguments_found():
        print(parameter.name, parameter.data)
