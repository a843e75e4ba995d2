"""Front ends: the ANSI console shell and the PyQt6 board window.

The console shell does not import PyQt6; import the Qt modules
(``xadrez.ui.board_scene``, ``xadrez.ui.main_window``, ``xadrez.ui.bootstrap``)
explicitly.
"""
