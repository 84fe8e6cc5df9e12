"""Domain model: persons, expenditures and the collections that hold them."""
