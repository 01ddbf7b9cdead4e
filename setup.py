from setuptools import setup, find_packages

setup(
    name='object-graph-visualizer',
    version='1.0.0',
    description='Cycle-safe object graph walker that renders Graphviz record diagrams',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'objviz.emitter': [
            'dot = objviz.emitters.dot:DotEmitter',
            'json = objviz.emitters.json_emitter:JsonEmitter',
        ],
        'console_scripts': [
            'objviz = objviz.cli.command_processor:main',
        ],
    },
    python_requires='>=3.8',
)
