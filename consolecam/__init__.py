"""ConsoleCam: live camera feed rendered as character art in a terminal."""
