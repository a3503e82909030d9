"""readme-sync — keep an extension README in step with its package.json.

Renders the manifest's ``commands`` and ``preferences`` arrays as
column-aligned markdown tables and splices them into the README between
HTML-comment markers:

    <!-- commands -->
    | Title | Description |
    ...
    <!-- commands -->

Anything outside the markers is preserved untouched.
"""

__version__ = "0.1.0"
