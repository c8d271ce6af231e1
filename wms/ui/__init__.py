"""Terminal text styling, the colour theme and ASCII-art weather icons."""