from .neuroevo_params import NeuroEvoParams
from .neuroevo_agent import NeuroEvoAgent
from .neuroevo_population import NeuroEvoPopulation
