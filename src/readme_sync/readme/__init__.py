"""README section splicing.

Generated tables live between a pair of HTML comments:

    <!-- commands -->

    | Title | Description |
    ...

    <!-- commands -->

Each section accepts a short and a ``-table`` suffixed marker name, in
any combination for the opening and closing marker. Only the region
between the first marker pair is replaced.
"""

# Section name -> accepted marker names
SECTIONS: dict[str, tuple[str, ...]] = {
    "commands": ("commands", "commands-table"),
    "configs": ("configs", "configs-table"),
}

README_FILENAME = "README.md"
