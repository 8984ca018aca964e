"""
Demo of K-Space clustering.

This example shows how to:
1. Cluster synthetic 2D blobs with both seeding strategies
2. Watch the assignment rounds through an iteration callback
3. Cluster cities by great-circle distance and plot the result
"""

import torch
import matplotlib.pyplot as plt

# Add parent directory to path for imports
import sys
sys.path.append('..')

from kspace import Space, SeedStrategy, KMeans, total_sse, plot_space_clusters


CITIES = {
    'Paris': (48.8566, 2.3522),
    'Lyon': (45.7640, 4.8357),
    'Brussels': (50.8503, 4.3517),
    'Madrid': (40.4168, -3.7038),
    'Lisbon': (38.7223, -9.1393),
    'Seville': (37.3891, -5.9845),
    'New York': (40.7128, -74.0060),
    'Boston': (42.3601, -71.0589),
    'Philadelphia': (39.9526, -75.1652),
}


def generate_blobs(n_points_per_cluster=100, centers=((0, 0), (6, 6), (0, 8)), scale=1.0):
    """Generate Gaussian blobs around the given centers."""
    torch.manual_seed(42)

    data_list = []
    for center in centers:
        points = torch.tensor(center, dtype=torch.float64) + \
            torch.randn(n_points_per_cluster, 2, dtype=torch.float64) * scale
        data_list.append(points)

    return torch.cat(data_list, dim=0)


def main():
    """Run the demo."""
    print("=== K-Space Clustering Demo ===\n")

    X = generate_blobs()
    print(f"Data shape: {tuple(X.shape)}\n")

    for seed in SeedStrategy:
        space = Space(2, random_state=42)
        for row in X:
            space.add_point(row)

        history = []
        clusters = space.solve(3, seed=seed,
                               iteration_callback=lambda s, c: history.append(total_sse(c)))

        print(f"{seed.value}: converged in {space.n_iter_} iterations, "
              f"sse = {total_sse(clusters):.2f}, sizes = {[c.size for c in clusters]}")
        print(f"  SSE before each round: {[round(v, 1) for v in history]}")

    kmeans = KMeans(n_clusters=3, init='dasv', random_state=0).fit(X)
    print(f"\nKMeans estimator: inertia = {kmeans.inertia_:.2f}")
    print(f"Centers:\n{kmeans.cluster_centers_}")

    print("\n=== Geographic clustering ===")
    earth = Space.earth(random_state=7)
    for name, (lat, lon) in CITIES.items():
        earth.add_point([lat, lon], payload=name)

    clusters = earth.solve(3, seed=SeedStrategy.DASV, max_iter=50)
    for k, cluster in enumerate(clusters):
        names = ', '.join(point.payload for point in cluster.members)
        print(f"Cluster {k} at {cluster.to_list()}: {names}")

    print("\nPlotting results...")
    fig, axes = plt.subplots(1, 2, figsize=(14, 6))
    blob_space = kmeans.space_
    plot_space_clusters(blob_space, kmeans.clusters_, ax=axes[0], title='Blobs (DASV)')
    plot_space_clusters(earth, clusters, ax=axes[1], title='Cities (great-circle)')
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
