"""Mixed workload scenario.

Combines the catalogue and shopper journeys with weights that model a
realistic storefront: mostly browsing, some buying, rare admin edits.
This is the recommended scenario for load baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.catalogue import AdminProductJourney, BrowseCatalogJourney
from loadtests.scenarios.shopper import (
    OrderAndPayJourney,
    OrderCancellationJourney,
    ReturningCustomerJourney,
)


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload simulating concurrent storefront activity.

    Browsing (60%):
    - Anonymous catalogue reads: featured, categories, search, detail

    Buying (30%):
    - Order and pay: happy path
    - Order and cancel: stock is reserved then released

    Accounts (8%):
    - Returning customer: login and profile edits

    Administration (2%):
    - Product create, update and occasional deactivation

    Concurrent orders for the same product contend on stock reservation,
    so occasional 400 "Insufficient stock" responses are expected.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowseCatalogJourney: 30,
        OrderAndPayJourney: 11,
        OrderCancellationJourney: 4,
        ReturningCustomerJourney: 4,
        AdminProductJourney: 1,
    }
