[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netbunch"
version = "0.1.0"
description = "Complex network analysis: clustering, components, betweenness and configuration-model sampling"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "complex networks",
    "graph",
    "clustering coefficient",
    "betweenness",
    "connected components",
    "strongly connected components",
    "configuration model",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clust = "netbunch.clustering:main"
clust_w = "netbunch.clustering:main_weighted"
components = "netbunch.components:main"
largest_component = "netbunch.components:largest_component_main"
conf_model_deg = "netbunch.conf:main"
conf_model_deg_nocheck = "netbunch.multigraph:main"
strong_conn = "netbunch.directed:main"
node_components = "netbunch.directed:node_components_main"
betweenness = "netbunch.betweenness:main"
bet_dependency = "netbunch.betweenness:dependency_main"

[tool.hatch.build.targets.wheel]
packages = ["netbunch"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
