"""
Shared fixtures: a small raw transaction table covering every cleaning rule.
"""

import numpy as np
import pandas as pd
import pytest


def make_raw_transactions() -> pd.DataFrame:
    """Ten raw rows; only the first four survive cleaning."""
    return pd.DataFrame({
        'Transaction_ID': range(1, 11),
        'Name': [f'Customer {i}' for i in range(1, 11)],
        'Email': [f'c{i}@example.com' for i in range(1, 11)],
        'Country': ['USA', 'Germany', 'Australia', 'Brazil', np.nan,
                    'UK', 'Canada', 'USA', 'UK', 'France'],
        'Age': [30, 18, 59, 45, 40, 10, 35, 26, 27, 58],
        'Month': ['January', 'June', 'September', 'December', 'March',
                  'April', 'May', 'Smarch', 'July', 'October'],
        'Total_Amount': ['19.4', '19.6', '100.0', '50.5', '10',
                         '30', '40', '20', 'abc', '70.7'],
        'Ratings': [4, 5, 3, 2, 1, 4, 5, 3, 2, np.nan],
        'Customer_Segment': ['Regular', 'Premium', 'New', 'Regular', 'New',
                             'New', 'Regular', 'Premium', 'Regular', 'Premium'],
        'Product_Category': ['Clothing'] * 6 + ['Electronics'] + ['Clothing'] * 3,
    })


@pytest.fixture
def raw_transactions():
    return make_raw_transactions()


@pytest.fixture
def raw_csv(tmp_path):
    path = tmp_path / "transactions.csv"
    make_raw_transactions().to_csv(path, index=False)
    return str(path)
