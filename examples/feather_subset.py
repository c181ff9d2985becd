"""A few Feather icons in the ``name -> {"contents", "attrs"}`` shape."""

icons = {
    "home": {
        "contents": (
            '<path d="M3 9l9-7 9 7v11a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"></path>'
            '<polyline points="9 22 9 12 15 12 15 22"></polyline>'
        ),
        "attrs": {},
    },
    "star": {
        "contents": (
            '<polygon points="12 2 15.09 8.26 22 9.27 17 14.14 '
            '18.18 21.02 12 17.77 5.82 21.02 7 14.14 2 9.27 8.91 8.26 12 2"></polygon>'
        ),
        "attrs": {},
    },
    "x": {
        "contents": (
            '<line x1="18" y1="6" x2="6" y2="18"></line>'
            '<line x1="6" y1="6" x2="18" y2="18"></line>'
        ),
        "attrs": {},
    },
}
