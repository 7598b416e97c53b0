"""
Copyright (c) 2025. All rights reserved.
"""

"""
Two-class point classification with scalargrad MLPs.

Modules:
    configs: Experiment configuration dataclasses
    dataset: CSV loading and two-moons data generation
    loss_functions: Hinge, MSE and L2 losses over Values
    train: SGD, learning rate schedules and the training loop
    logger: TensorBoard logger
    utils: Seeding and plotting
    experiment: Experiment orchestrator
    main: Command line entry point
"""
