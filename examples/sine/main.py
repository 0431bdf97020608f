import matplotlib.pyplot as plt
import numpy as np

from ffbp import NeuralNetwork
from ffbp.core.logger import setup_logging
from ffbp.data import sine
from ffbp.score_functions import mean_squared_error
from ffbp.util.on_iterate import log_errors, plot_errors


setup_logging(stdout=True)

random_state = np.random.RandomState(1234)

# Create a toy dataset ########################################################

training = sine.make_dataset(n=40, noise=0.05, random_state=random_state)
testing = sine.make_dataset(n=20, random_state=random_state)

# Set up the model and fit it #################################################

net = NeuralNetwork(1, 8, 1, regression=True, random_state=random_state)

n_iterations = 2000

plt.figure()
net.train(
    training, iterations=n_iterations,
    learning_rate=0.05, momentum_factor=0.5,
    on_iterate=[
        log_errors(every=200, n_iterations=n_iterations),
        plot_errors(every=50),
    ]
)

print("Test MSE: %.5f" % net.score(testing, score_func=mean_squared_error))

# Plot the fitted curve #######################################################

x = np.linspace(0, 2*np.pi, 200)
y = [net.predict([xi])[0] for xi in x]

plt.figure()
plt.plot(x, np.sin(x), 'k--', label='sin(x)')
plt.plot(x, y, 'r-', label='network')
plt.plot([ex[0][0] for ex in training], [ex[1][0] for ex in training],
         'b.', label='training data')
plt.legend()
plt.show()
