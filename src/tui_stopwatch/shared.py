from textual.widget import Widget

def titled(
    w: Widget, /, title: str, skip_bottom: bool = False,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
