# Models package: import from the specific submodule
# (e.g. perfbudget.models.budget).
