"""Firebase-to-Segment analytics forwarding functions for Open Source Hub."""
