import matplotlib.pyplot as plt
import networkx as nx

from weighted_graph import empty, to_networkx

# Build a small weighted graph using weighted_graph
g = empty("vertices")
g.set("0", "1", 4)
g.set("1", "2", 2)
g.set("1", "3", 7)
g.set("3", "4", 1)
g.set("4", "1", 3)

# Convert to a networkx DiGraph
G = to_networkx(g)

# Draw the graph using circular layout, labelling edges with their weights
plt.figure(figsize=(6, 6))
pos = nx.circular_layout(G)
nx.draw(
    G,
    pos,
    with_labels=True,
    node_color="lightblue",
    edge_color="gray",
    node_size=800,
    font_size=10,
    font_weight="bold",
    arrows=True,
)
nx.draw_networkx_edge_labels(G, pos, edge_labels=nx.get_edge_attributes(G, "weight"))
plt.title("Weighted Graph Visualization (networkx)")
plt.tight_layout()
plt.show()
