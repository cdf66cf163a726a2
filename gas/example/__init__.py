"""A small demonstration world of four units driving the ability system."""