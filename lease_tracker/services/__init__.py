"""Pure contract computations: dates, escalation, semaphore and views."""
