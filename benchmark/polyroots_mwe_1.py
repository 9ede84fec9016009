# Install ;#\polyroots#; with ;#"\texttt{pip install \polyroots}"#;
import polyroots as pr

# Coefficients of ;#$ p(z) = (z-1)(z-2)(z-3)(z-4)(z-5) $#; in decreasing order of degree
coeffs = [1, -15, 85, -225, 274, -120]

# Roots by the three-stage Jenkins-Traub algorithm
roots_jt = pr.jenkins_traub(coeffs)

# Roots by the simultaneous Durand-Kerner iteration
roots_dk = pr.durand_kerner(coeffs)

# Closed-form roots of the quartic ;#$ z^4 - 10 z^3 + 35 z^2 - 50 z + 24 $#;
roots_q = pr.quartic_roots(1, -10, 35, -50, 24)

# Remove numerically repeated roots, compared componentwise within ;#$ 10^{-14} $#;
roots = pr.distinct_roots(roots_jt)

# Plot the roots of ;#$ z^8 + 1 $#; in the complex plane
pr.visualization.plot_roots(pr.jenkins_traub([1, 0, 0, 0, 0, 0, 0, 0, 1]))
