"""
K-means clustering estimator.

A fit/predict facade over ``Space`` for data held in a 2D tensor or array.
Each row becomes a point whose payload is its row index.
"""

from typing import Any, Dict, List, Optional, Union
import torch
from torch import Tensor
import numpy as np

from ..base.data_structures import Cluster
from ..base.interfaces import DistanceMetric, InitializationStrategy, SeedStrategy
from ..base.space import Space
from ..utils.metrics import cluster_centers, total_sse
from ..utils.validation import validate_data, check_n_clusters


class KMeans:
    """K-means clustering algorithm.

    Partitions data into K clusters by alternating nearest-centroid
    assignment and mean updates until no point changes cluster.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str, SeedStrategy or InitializationStrategy, default='default'
        Seeding method:
        - 'default' : random centroids inside the data bounding box
        - 'dasv' : K-means++ seeding among the data points
    metric : DistanceMetric, optional
        Distance metric (Euclidean if None)
    max_iter : int, optional
        Maximum number of rounds with movement. None runs to convergence
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducibility

    Attributes
    ----------
    space_ : Space
        Space holding the training points
    clusters_ : list of Cluster
        Solved clusters
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Sum of squared distances to the assigned centroid
    n_iter_ : int
        Number of rounds in which at least one point moved
    """

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, SeedStrategy, InitializationStrategy] = 'default',
                 metric: Optional[DistanceMetric] = None,
                 max_iter: Optional[int] = None,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        self.n_clusters = n_clusters
        self.init = init
        self.metric = metric
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state

        self.fitted_ = False
        self.space_: Optional[Space] = None
        self.clusters_: Optional[List[Cluster]] = None
        self.labels_: Optional[Tensor] = None
        self.n_iter_ = 0

    def fit(self, X: Union[Tensor, np.ndarray, list], y: Any = None) -> 'KMeans':
        """Fit K-means clustering.

        Parameters
        ----------
        X : Tensor, ndarray or list of shape (n_samples, n_features)
            Training data
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        check_n_clusters(self.n_clusters)
        X = validate_data(X)
        n_samples, n_features = X.shape

        space = Space(n_features, metric=self.metric,
                      random_state=self.random_state, verbose=self.verbose)
        for i in range(n_samples):
            space.add_point(X[i], payload=i)

        clusters = space.solve(self.n_clusters, seed=self.init, max_iter=self.max_iter)

        labels = torch.full((n_samples,), -1, dtype=torch.long)
        for k, cluster in enumerate(clusters):
            for point in cluster.members:
                labels[point.payload] = k

        self.space_ = space
        self.clusters_ = clusters
        self.labels_ = labels
        self.n_iter_ = space.n_iter_
        self.fitted_ = True
        return self

    def fit_predict(self, X: Union[Tensor, np.ndarray, list], y: Any = None) -> Tensor:
        """Fit and return labels of the training data."""
        self.fit(X, y)
        return self.labels_

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Predict cluster labels for new data.

        Parameters
        ----------
        X : Tensor, ndarray or list of shape (n_samples, n_features)
            New data to predict

        Returns
        -------
        labels : Tensor of shape (n_samples,)
            Index of the closest fitted centroid for each row
        """
        self._check_fitted()
        X = validate_data(X)

        labels = torch.empty(X.shape[0], dtype=torch.long)
        index = {cluster: k for k, cluster in enumerate(self.clusters_)}
        for i in range(X.shape[0]):
            point = self.space_.new_point(X[i])
            labels[i] = index[point.closest_among(self.clusters_)]
        return labels

    def score(self, X: Union[Tensor, np.ndarray, list], y: Any = None) -> float:
        """Opposite of the value of X on the K-means objective."""
        self._check_fitted()
        X = validate_data(X)

        total = 0.0
        for i in range(X.shape[0]):
            point = self.space_.new_point(X[i])
            total += point.distance_to(point.closest_among(self.clusters_), precise=False)
        return -total

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centroids."""
        self._check_fitted()
        return cluster_centers(self.clusters_)

    @property
    def inertia_(self) -> float:
        """Get total sum of squared errors of the training data."""
        self._check_fitted()
        return total_sse(self.clusters_)

    def _check_fitted(self) -> None:
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'init': self.init,
            'metric': self.metric,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'KMeans':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            setattr(self, key, value)
        return self
