DATA_FILE = "../data/square.tsp"
STDIN_MARKER = "-"

COORD_DELIMITER = "NODE_COORD_SECTION"
EOF_MARKER = "EOF"

HULL_HEADER = "Points forming the convex hull:"
